from __future__ import annotations

import logging
from typing import Optional, Sequence

from .. import config
from ..errors import NoSolutionError, SearchBudgetExceeded
from ..paint import Customer, Finish, PaintMix, validate_instance
from .types import SolveResult

logger = logging.getLogger(__name__)


def solve_with_z3(
    number_of_colors: int,
    customers: Sequence[Customer],
    *,
    timeout_ms: Optional[int] = config.DEFAULT_TIMEOUT_MS,
) -> SolveResult:
    """Solve using Z3's optimizer.

    One Bool per color (True => Matte), one clause per customer, and the
    number of Matte colors is minimized. Ties go to the model z3 returns,
    so this backend agrees with the propagation solver on satisfiability
    and on the Matte count it can reach, not necessarily on the exact mix.
    """

    try:
        import z3  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("z3-solver is required. Install with: pip install z3-solver") from e

    customers = list(customers)
    validate_instance(number_of_colors, customers)

    matte = [z3.Bool(f"matte_{color}") for color in range(number_of_colors)]

    opt = z3.Optimize()
    if timeout_ms is not None:
        opt.set(timeout=timeout_ms)

    for customer in customers:
        opt.add(
            z3.Or(
                [
                    matte[p.color] if p.finish is Finish.MATTE else z3.Not(matte[p.color])
                    for p in customer.paints
                ]
            )
        )

    opt.minimize(z3.Sum([z3.If(m, 1, 0) for m in matte]))

    chk = opt.check()
    if chk == z3.unknown:
        reason = opt.reason_unknown()
        raise SearchBudgetExceeded(f"Solver returned UNKNOWN (no solution reported). Reason: {reason}")
    if chk != z3.sat:
        raise NoSolutionError(f"No mix satisfies every customer. Z3 status: {chk}")

    model = opt.model()
    finishes = tuple(
        Finish.MATTE if z3.is_true(model.eval(m, model_completion=True)) else Finish.GLOSS
        for m in matte
    )
    mix = PaintMix(finishes=finishes)
    logger.info("z3 solved %d colors for %d customers (matte=%d)", number_of_colors, len(customers), len(mix.matte_colors()))
    return SolveResult(mix=mix, locked_paints=frozenset(), passes=1, tried_mixes=0)

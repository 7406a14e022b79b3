from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import List, Optional, Sequence

from .. import config
from ..errors import SearchBudgetExceeded
from ..paint import Customer, Finish, Paint, validate_instance
from .propagation import propagate_multiple, propagate_single
from .state import Solution
from .types import SolveResult

logger = logging.getLogger(__name__)


def default_max_passes(number_of_colors: int) -> int:
    # Only substitutions end a pass, and each one enters a mix that was never
    # left before and differs from the first mix left: at most 2 ** N - 1 resets.
    return 2 ** number_of_colors


def run_pass(customers: Sequence[Customer], solution: Solution) -> Solution:
    """Feed every unlocked customer, most constrained first, through propagation.

    A forced lock or a backtrack restarts the customer loop within this
    pass. A substitution ends the pass with `needs_reset` still set.
    """

    while True:
        pending = sorted(
            (c for c in customers if not solution.is_customer_locked(c)),
            key=len,
        )
        for customer in pending:
            if len(customer) == 1:
                solution = propagate_single(customer, solution)
            else:
                solution = propagate_multiple(customer, solution)
            if solution.needs_reset:
                break
        if not solution.needs_reset or solution.branched:
            return solution
        logger.debug("Restarting pass at mix=%s locks=%d", solution.mix.fingerprint(), len(solution.locked_paints))
        solution = solution.reset()


def relax_to_gloss(customers: Sequence[Customer], solution: Solution) -> Solution:
    """Put unlocked Matte colors back to Gloss wherever every customer stays happy.

    Repeats until no single color can be relaxed.
    """

    mix = solution.mix
    changed = True
    while changed:
        changed = False
        for color in mix.matte_colors():
            if solution.locked_finish_for(color) is not None:
                continue
            candidate = mix.set(Paint(color, Finish.GLOSS))
            if all(candidate.satisfies(c) for c in customers):
                logger.debug("Relaxed color %d back to gloss", color)
                mix = candidate
                changed = True
    return replace(solution, mix=mix)


def solve_with_propagation(
    number_of_colors: int,
    customers: Sequence[Customer],
    *,
    timeout_ms: Optional[int] = config.DEFAULT_TIMEOUT_MS,
    max_passes: Optional[int] = config.DEFAULT_MAX_PASSES,
    relax_gloss: bool = config.RELAX_GLOSS,
) -> SolveResult:
    """Solve by locking forced paints and substituting until nothing changes."""

    start_time = time.monotonic()
    customers = list(customers)
    validate_instance(number_of_colors, customers)

    budget = default_max_passes(number_of_colors) if max_passes is None else max_passes

    def check_timeout() -> None:
        if timeout_ms is None:
            return
        elapsed_ms = (time.monotonic() - start_time) * 1000.0
        if elapsed_ms > timeout_ms:
            raise SearchBudgetExceeded(f"Propagation solver timed out after {timeout_ms}ms")

    solution = Solution.initial(number_of_colors)
    passes = 0

    check_timeout()
    while True:
        if passes >= budget:
            raise SearchBudgetExceeded(f"Propagation solver gave up after {passes} passes")
        passes += 1
        if passes % config.TIMEOUT_CHECK_INTERVAL == 0:
            check_timeout()

        solution = run_pass(customers, solution)
        if not solution.needs_reset:
            break
        logger.debug(
            "Reset after pass %d: mix=%s locks=%d tried=%d",
            passes,
            solution.mix.fingerprint(),
            len(solution.locked_paints),
            len(solution.tried_mixes),
        )
        solution = solution.reset()

    unhappy: List[int] = [c.id for c in customers if not solution.mix.satisfies(c)]
    if unhappy:
        raise AssertionError(f"Fixed point leaves customers unsatisfied (solver bug): {unhappy}")

    if relax_gloss:
        solution = relax_to_gloss(customers, solution)

    logger.info(
        "Solved %d colors for %d customers in %d passes (tried=%d, matte=%d)",
        number_of_colors,
        len(customers),
        passes,
        len(solution.tried_mixes),
        len(solution.mix.matte_colors()),
    )
    return SolveResult(
        mix=solution.mix,
        locked_paints=solution.locked_paints,
        passes=passes,
        tried_mixes=len(solution.tried_mixes),
    )

from typing import Optional, Sequence

from .. import config
from ..paint import Customer
from .propagation_solver import solve_with_propagation
from .types import SolveResult, SolverName
from .z3_solver import solve_with_z3

SOLVER_CHOICES: tuple[SolverName, ...] = ("propagation", "z3")


def solve_paint_shop(
    number_of_colors: int,
    customers: Sequence[Customer],
    *,
    solver: SolverName = config.DEFAULT_SOLVER,
    timeout_ms: Optional[int] = config.DEFAULT_TIMEOUT_MS,
    max_passes: Optional[int] = config.DEFAULT_MAX_PASSES,
) -> SolveResult:
    if solver == "propagation":
        return solve_with_propagation(number_of_colors, customers, timeout_ms=timeout_ms, max_passes=max_passes)
    if solver == "z3":
        return solve_with_z3(number_of_colors, customers, timeout_ms=timeout_ms)
    raise ValueError(f"Unknown solver {solver!r}. Choose one of: {', '.join(SOLVER_CHOICES)}")


__all__ = [
    "SolveResult",
    "SolverName",
    "SOLVER_CHOICES",
    "solve_paint_shop",
    "solve_with_propagation",
    "solve_with_z3",
]

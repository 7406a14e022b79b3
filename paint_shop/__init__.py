from .errors import (
    LockViolationError,
    MalformedInputError,
    NoSolutionError,
    PaintShopError,
    SearchBudgetExceeded,
)
from .paint import Customer, Finish, Paint, PaintComparison, PaintMix
from .solver import SOLVER_CHOICES, SolveResult, solve_paint_shop

__all__ = [
    "Customer",
    "Finish",
    "LockViolationError",
    "MalformedInputError",
    "NoSolutionError",
    "Paint",
    "PaintComparison",
    "PaintMix",
    "PaintShopError",
    "SOLVER_CHOICES",
    "SearchBudgetExceeded",
    "SolveResult",
    "solve_paint_shop",
]

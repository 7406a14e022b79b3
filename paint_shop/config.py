"""Default settings shared by the solver backends.

Every value here can be overridden per call through the keyword arguments
of `paint_shop.solver.solve_paint_shop`.
"""

from __future__ import annotations

from typing import Literal, Optional

# Backend used when the caller does not pick one: "propagation" or "z3".
DEFAULT_SOLVER: Literal["propagation", "z3"] = "propagation"

# Wall-clock budget per solve. None disables the clock.
DEFAULT_TIMEOUT_MS: Optional[int] = 30_000

# Upper bound on propagation passes. None means 2 ** N: only a substitution
# ends a pass, and each enters a mix never left before.
DEFAULT_MAX_PASSES: Optional[int] = None

# The clock is read once every this many passes.
TIMEOUT_CHECK_INTERVAL: int = 64

# After a fixed point, try each unlocked Matte color back at Gloss.
RELAX_GLOSS: bool = True

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List, Literal

from ..paint import Finish, Paint, PaintMix

SolverName = Literal["propagation", "z3"]


@dataclass
class SolveResult:
    mix: PaintMix
    locked_paints: FrozenSet[Paint]  # empty for backends that do not lock
    passes: int  # propagation passes run, 1 for one-shot backends
    tried_mixes: int  # distinct mixes rejected on the way

    @property
    def finishes(self) -> List[Finish]:
        return list(self.mix.finishes)

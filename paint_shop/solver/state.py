from __future__ import annotations

from dataclasses import dataclass, replace
from typing import FrozenSet, Optional, Tuple

from ..errors import LockViolationError
from ..paint import Color, Customer, Finish, Paint, PaintComparison, PaintMix


@dataclass(frozen=True)
class Solution:
    """Search state threaded by value through every propagation step.

    - `mix` is the current candidate assignment.
    - `locked_paints` can never change again for the rest of the solve.
    - `locked_customers` holds ids of customers already frozen as satisfied.
    - `tried_mixes` holds fingerprints of mixes that were left behind.
    - `trail` is the stack of mixes substituted away from, newest last.
    - `needs_reset` asks the driver to restart the current pass.
    - `branched` marks that restart as coming from a substitution.
    """

    mix: PaintMix
    locked_paints: FrozenSet[Paint] = frozenset()
    locked_customers: FrozenSet[int] = frozenset()
    tried_mixes: FrozenSet[str] = frozenset()
    trail: Tuple[PaintMix, ...] = ()
    needs_reset: bool = False
    branched: bool = False

    @classmethod
    def initial(cls, number_of_colors: int) -> Solution:
        return cls(mix=PaintMix.all_gloss(number_of_colors))

    def locked_finish_for(self, color: Color) -> Optional[Finish]:
        for paint in self.locked_paints:
            if paint.color == color:
                return paint.finish
        return None

    def lock_conflict(self, paint: Paint) -> bool:
        """True if some locked paint holds `paint.color` at another finish."""
        return any(
            locked.compare(paint) is PaintComparison.COLOR_MATCHES_FINISH_DIFFERENT
            for locked in self.locked_paints
        )

    def is_customer_locked(self, customer: Customer) -> bool:
        return customer.id in self.locked_customers

    def lock(self, customer: Customer, paint: Paint) -> Solution:
        if self.lock_conflict(paint):
            raise LockViolationError(f"Cannot lock {paint!r}: color {paint.color} is locked to another finish")
        if not self.mix.has(paint):
            raise LockViolationError(f"Cannot lock {paint!r}: the mix holds {self.mix.finish_for(paint.color)!r}")
        return replace(
            self,
            locked_paints=self.locked_paints | {paint},
            locked_customers=self.locked_customers | {customer.id},
        )

    def lock_customer(self, customer: Customer) -> Solution:
        return replace(self, locked_customers=self.locked_customers | {customer.id})

    def record_rejected(self, mix: PaintMix) -> Solution:
        return replace(self, tried_mixes=self.tried_mixes | {mix.fingerprint()})

    def was_rejected(self, candidate: PaintMix) -> bool:
        return candidate.fingerprint() in self.tried_mixes

    def apply(self, paint: Paint) -> Solution:
        if self.lock_conflict(paint):
            raise LockViolationError(f"Cannot apply {paint!r}: color {paint.color} is locked to another finish")
        return replace(self, mix=self.mix.set(paint))

    def apply_locks(self, mix: PaintMix) -> PaintMix:
        for paint in sorted(self.locked_paints, key=lambda p: p.color):
            mix = mix.set(paint)
        return mix

    def force(self, customer: Customer, paint: Paint) -> Solution:
        """Move to the only paint `customer` has left and lock it."""
        forced = self.record_rejected(self.mix).apply(paint).lock(customer, paint)
        return replace(forced, needs_reset=True, branched=False)

    def substitute(self, paint: Paint) -> Solution:
        """Leave the current mix for one with `paint` set, remembering the way back."""
        moved = self.record_rejected(self.mix).apply(paint)
        return replace(moved, trail=self.trail + (self.mix,), needs_reset=True, branched=True)

    def backtrack(self) -> Solution:
        """Reject the current mix and return to the previous one on the trail.

        Locks acquired since that mix was left are re-applied to it.
        """
        if not self.trail:
            raise IndexError("backtrack() on an empty trail")
        rejected = self.record_rejected(self.mix)
        previous = self.apply_locks(self.trail[-1])
        return replace(rejected, mix=previous, trail=self.trail[:-1], needs_reset=True, branched=False)

    def reset(self) -> Solution:
        return replace(self, needs_reset=False, branched=False)

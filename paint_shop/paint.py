from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Sequence, Tuple

from .errors import MalformedInputError

Color = int


class Finish(Enum):
    GLOSS = "G"
    MATTE = "M"


class PaintComparison(Enum):
    MATCH = "match"
    COLOR_MATCHES_FINISH_DIFFERENT = "color_matches_finish_different"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class Paint:
    color: Color
    finish: Finish

    def compare(self, other: Paint) -> PaintComparison:
        if self.color != other.color:
            return PaintComparison.NO_MATCH
        if self.finish != other.finish:
            return PaintComparison.COLOR_MATCHES_FINISH_DIFFERENT
        return PaintComparison.MATCH


@dataclass(frozen=True)
class Customer:
    """A customer is happy if the final mix contains any one of `paints`.

    - `id` is the identity used for locking and dedup.
    - `paints` keeps the customer's own preference order.
    """

    id: int
    paints: Tuple[Paint, ...]

    @classmethod
    def of(cls, customer_id: int, pairs: Iterable[Tuple[Color, Finish]]) -> Customer:
        return cls(id=customer_id, paints=tuple(Paint(int(c), f) for c, f in pairs))

    def __len__(self) -> int:
        return len(self.paints)


@dataclass(frozen=True)
class PaintMix:
    """One finish per color, indexed by color. Never mutated in place."""

    finishes: Tuple[Finish, ...]

    @classmethod
    def all_gloss(cls, number_of_colors: int) -> PaintMix:
        return cls(finishes=(Finish.GLOSS,) * number_of_colors)

    def set(self, paint: Paint) -> PaintMix:
        finishes = list(self.finishes)
        finishes[paint.color] = paint.finish
        return PaintMix(finishes=tuple(finishes))

    def finish_for(self, color: Color) -> Finish:
        return self.finishes[color]

    def has(self, paint: Paint) -> bool:
        return self.finishes[paint.color] == paint.finish

    def satisfies(self, customer: Customer) -> bool:
        return any(self.has(p) for p in customer.paints)

    def fingerprint(self) -> str:
        return "".join(f.value for f in self.finishes)

    def matte_colors(self) -> list[Color]:
        return [c for c, f in enumerate(self.finishes) if f is Finish.MATTE]

    def __len__(self) -> int:
        return len(self.finishes)

    def __iter__(self) -> Iterator[Finish]:
        return iter(self.finishes)


def validate_instance(number_of_colors: int, customers: Sequence[Customer]) -> None:
    """Reject malformed instances before any propagation starts."""

    if number_of_colors <= 0:
        raise MalformedInputError(f"number_of_colors must be positive, got {number_of_colors!r}")

    seen: dict[int, Customer] = {}
    for customer in customers:
        if not customer.paints:
            raise MalformedInputError(f"Customer {customer.id!r} has no acceptable paints")
        for paint in customer.paints:
            if not 0 <= paint.color < number_of_colors:
                raise MalformedInputError(
                    f"Customer {customer.id!r} wants color {paint.color!r}, "
                    f"outside [0, {number_of_colors})"
                )
            if not isinstance(paint.finish, Finish):
                raise MalformedInputError(f"Customer {customer.id!r} has a paint with no finish: {paint!r}")
        prev = seen.get(customer.id)
        if prev is not None and prev.paints != customer.paints:
            raise MalformedInputError(f"Duplicate customer id {customer.id!r} with different paints")
        seen[customer.id] = customer

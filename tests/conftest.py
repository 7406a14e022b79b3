from __future__ import annotations

import itertools
import random
from typing import List, Optional, Sequence

import pytest

from paint_shop import Customer, Finish, PaintMix


def _fewest_matte(number_of_colors: int, customers: Sequence[Customer]) -> Optional[int]:
    """Fewest Matte colors over all satisfying mixes, or None if unsatisfiable."""
    best: Optional[int] = None
    for finishes in itertools.product((Finish.GLOSS, Finish.MATTE), repeat=number_of_colors):
        mix = PaintMix(finishes=tuple(finishes))
        if all(mix.satisfies(c) for c in customers):
            n_matte = len(mix.matte_colors())
            if best is None or n_matte < best:
                best = n_matte
    return best


def _random_instance(seed: int) -> tuple[int, List[Customer]]:
    rng = random.Random(seed)
    number_of_colors = rng.randint(1, 6)
    customers = []
    for cid in range(rng.randint(0, 8)):
        size = rng.choice([1, 1, 2, 2, 3])
        pairs = [
            (rng.randrange(number_of_colors), rng.choice([Finish.GLOSS, Finish.MATTE]))
            for _ in range(size)
        ]
        customers.append(Customer.of(cid, pairs))
    return number_of_colors, customers


@pytest.fixture
def fewest_matte():
    return _fewest_matte


@pytest.fixture
def random_instance():
    return _random_instance


def _hard_instance(seed: int) -> tuple[int, List[Customer]]:
    """Three distinct colors per customer, about 4.3 customers per color."""
    rng = random.Random(seed)
    number_of_colors = rng.randint(6, 9)
    customers = []
    for cid in range(round(4.3 * number_of_colors)):
        colors = rng.sample(range(number_of_colors), 3)
        customers.append(
            Customer.of(cid, [(c, rng.choice([Finish.GLOSS, Finish.MATTE])) for c in colors])
        )
    return number_of_colors, customers


@pytest.fixture
def hard_instance():
    return _hard_instance

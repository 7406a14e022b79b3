"""Per-customer propagation rules.

Each rule takes a customer and a `Solution` and returns a new `Solution`;
the input is never modified. A rule either leaves the mix alone, changes
it and asks for a reset, or raises.
"""

from __future__ import annotations

import logging
from typing import List

from ..errors import MalformedInputError, NoSolutionError
from ..paint import Customer, Paint
from .state import Solution

logger = logging.getLogger(__name__)


def propagate_single(customer: Customer, solution: Solution) -> Solution:
    """Customer with exactly one acceptable paint: lock it or fail."""

    if not customer.paints:
        raise MalformedInputError(f"Customer {customer.id!r} has no acceptable paints")
    if len(customer.paints) != 1:
        raise MalformedInputError(
            f"Customer {customer.id!r} has {len(customer.paints)} paints; expected exactly one"
        )

    paint = customer.paints[0]

    if paint in solution.locked_paints:
        return solution.lock_customer(customer)

    if solution.lock_conflict(paint):
        raise NoSolutionError(
            f"Customer {customer.id!r} needs {paint!r} but color {paint.color} "
            f"is locked to {solution.locked_finish_for(paint.color)!r}"
        )

    logger.debug("Locking %r for single-paint customer %r", paint, customer.id)
    return solution.apply(paint).lock(customer, paint)


def viable_paints(customer: Customer, solution: Solution) -> List[Paint]:
    """Paints of `customer`, in preference order, not ruled out by a lock."""

    out: List[Paint] = []
    for paint in customer.paints:
        if paint in out or solution.lock_conflict(paint):
            continue
        out.append(paint)
    return out


def propagate_multiple(customer: Customer, solution: Solution) -> Solution:
    """Customer with several acceptable paints.

    1. Already satisfied by the mix: nothing changes. If the satisfying paint
       is locked, the customer is locked too; a locked paint never leaves
       the mix, so that satisfaction is permanent.
    2. Only one paint survives the locks: it is forced and locked.
    3. Otherwise the first paint whose resulting mix was never rejected is
       substituted in and a reset is requested.
    4. No such paint: backtrack to the previous mix, or fail when there is
       none left.

    Steps 2 and 4 restart the pass in place; only step 3 ends it.
    """

    if not customer.paints:
        raise MalformedInputError(f"Customer {customer.id!r} has no acceptable paints")

    if solution.mix.satisfies(customer):
        if any(p in solution.locked_paints for p in customer.paints):
            return solution.lock_customer(customer)
        return solution

    options = viable_paints(customer, solution)
    if not options:
        raise NoSolutionError(f"Every paint of customer {customer.id!r} conflicts with a locked paint")

    if len(options) == 1:
        paint = options[0]
        logger.debug("Forcing %r for customer %r (only option left)", paint, customer.id)
        return solution.force(customer, paint)

    for paint in options:
        if not solution.was_rejected(solution.mix.set(paint)):
            logger.debug("Substituting %r for customer %r", paint, customer.id)
            return solution.substitute(paint)

    if solution.trail:
        logger.debug("Customer %r exhausted its options at %s; backtracking", customer.id, solution.mix.fingerprint())
        return solution.backtrack()

    raise NoSolutionError(f"Customer {customer.id!r} cannot be satisfied by any untried mix")

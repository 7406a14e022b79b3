import pytest

from paint_shop import Customer, Finish, MalformedInputError, NoSolutionError, Paint, PaintMix
from paint_shop.solver.propagation import propagate_multiple, propagate_single, viable_paints
from paint_shop.solver.state import Solution

G = Finish.GLOSS
M = Finish.MATTE


def test_single_locks_and_sets_mix():
    c = Customer.of(0, [(1, M)])
    s = propagate_single(c, Solution.initial(2))
    assert s.mix.fingerprint() == "GM"
    assert Paint(1, M) in s.locked_paints
    assert s.is_customer_locked(c)
    assert not s.needs_reset


def test_single_already_locked_only_locks_customer():
    first = Customer.of(0, [(0, G)])
    second = Customer.of(1, [(0, G)])
    s = propagate_single(first, Solution.initial(1))
    t = propagate_single(second, s)
    assert t.mix == s.mix
    assert t.locked_paints == s.locked_paints
    assert t.is_customer_locked(second)


def test_single_conflicting_lock_fails():
    s = propagate_single(Customer.of(0, [(0, G)]), Solution.initial(1))
    with pytest.raises(NoSolutionError):
        propagate_single(Customer.of(1, [(0, M)]), s)


def test_single_rejects_wrong_arity():
    with pytest.raises(MalformedInputError):
        propagate_single(Customer.of(0, []), Solution.initial(1))
    with pytest.raises(MalformedInputError):
        propagate_single(Customer.of(0, [(0, G), (0, M)]), Solution.initial(1))


def test_multi_empty_is_malformed():
    with pytest.raises(MalformedInputError):
        propagate_multiple(Customer.of(0, []), Solution.initial(1))


def test_multi_satisfied_by_mix_changes_nothing():
    c = Customer.of(0, [(0, M), (1, G)])
    s = Solution.initial(2)
    assert propagate_multiple(c, s) is s


def test_multi_satisfied_by_locked_paint_locks_customer():
    s = propagate_single(Customer.of(0, [(1, G)]), Solution.initial(2))
    c = Customer.of(1, [(0, M), (1, G)])
    t = propagate_multiple(c, s)
    assert t.is_customer_locked(c)
    assert t.mix == s.mix


def test_multi_substitutes_first_untried_paint():
    c = Customer.of(0, [(0, M), (1, M)])
    s = propagate_multiple(c, Solution.initial(2))
    assert s.mix.fingerprint() == "MG"
    assert s.needs_reset
    assert s.was_rejected(PaintMix.all_gloss(2))
    assert not s.locked_paints


def test_multi_skips_rejected_candidates():
    c = Customer.of(0, [(0, M), (1, M)])
    s = Solution.initial(2).record_rejected(PaintMix(finishes=(M, G)))
    t = propagate_multiple(c, s)
    assert t.mix.fingerprint() == "GM"


def test_multi_forces_only_viable_paint():
    s = propagate_single(Customer.of(0, [(0, G)]), Solution.initial(3))
    c = Customer.of(1, [(0, M), (2, M)])
    assert viable_paints(c, s) == [Paint(2, M)]

    t = propagate_multiple(c, s)
    assert t.mix.fingerprint() == "GGM"
    assert Paint(2, M) in t.locked_paints
    assert t.is_customer_locked(c)
    assert t.needs_reset


def test_multi_all_options_locked_against_fails():
    s = Solution.initial(2)
    s = propagate_single(Customer.of(0, [(0, G)]), s)
    s = propagate_single(Customer.of(1, [(1, G)]), s)
    with pytest.raises(NoSolutionError):
        propagate_multiple(Customer.of(2, [(0, M), (1, M)]), s)


def test_multi_backtracks_when_exhausted():
    c = Customer.of(0, [(0, M), (1, M)])
    s = Solution.initial(2).substitute(Paint(0, G)).reset()
    s = s.record_rejected(PaintMix(finishes=(M, G))).record_rejected(PaintMix(finishes=(G, M)))
    assert s.trail
    t = propagate_multiple(c, s)
    assert t.trail == ()
    assert t.needs_reset


def test_multi_exhausted_without_trail_fails():
    c = Customer.of(0, [(0, M), (1, M)])
    s = Solution.initial(2).record_rejected(PaintMix(finishes=(M, G))).record_rejected(PaintMix(finishes=(G, M)))
    with pytest.raises(NoSolutionError):
        propagate_multiple(c, s)


def test_viable_paints_matches_by_color_not_position():
    s = propagate_single(Customer.of(0, [(2, M)]), Solution.initial(3))
    c = Customer.of(1, [(2, G), (0, M), (1, M)])
    assert viable_paints(c, s) == [Paint(0, M), Paint(1, M)]

import pytest

from permgroups.permutation import (
    ConjugationAction,
    MultiplicationAction,
    Permutation,
    SimpleApplication,
    order_n_permutation,
)


def test_from_images_apply():
    p = Permutation.from_images([1, 2, 3, 0])
    assert [p.apply(i) for i in range(4)] == [1, 2, 3, 0]
    assert p.apply(10) == 10


def test_from_images_rejects_non_permutation():
    with pytest.raises(ValueError):
        Permutation.from_images([0, 0, 1])
    with pytest.raises(ValueError):
        Permutation.from_images([1, 2])


def test_identity():
    assert Permutation.identity().is_id()
    assert Permutation.from_images([0, 1, 2]) == Permutation.identity()
    assert Permutation.identity().lmp() is None
    assert str(Permutation.identity()) == "()"


def test_single_cycle_is_one_indexed():
    assert Permutation.single_cycle([1, 2, 3]) == Permutation.from_images([1, 2, 0])


def test_from_cycles_errors():
    with pytest.raises(ValueError):
        Permutation.from_cycles([[1, 2], [2, 3]])
    with pytest.raises(ValueError):
        Permutation.single_cycle([0, 1])


def test_multiply_applies_left_first():
    p = Permutation.from_images([1, 0, 2])
    q = Permutation.from_images([0, 2, 1])
    pq = p.multiply(q)
    for i in range(3):
        assert pq.apply(i) == q.apply(p.apply(i))
    assert p * q == pq


def test_inverse_round_trip():
    p = Permutation.from_cycles([[1, 6, 4, 3], [2, 7, 5]])
    assert p.multiply(p.inv()).is_id()
    assert p.inv().multiply(p).is_id()
    assert p.inv().inv() == p


def test_pow():
    g = Permutation.from_images([3, 0, 1, 2])
    assert g.pow(4).is_id()
    assert g.pow(0).is_id()
    assert g.pow(2) == g.multiply(g)
    assert g.pow(-1) == g.inv()
    assert g ** 3 == g.pow(-1)


def test_lmp():
    assert Permutation.single_cycle([2, 5]).lmp() == 4
    assert Permutation.from_images([1, 0, 2, 3]).lmp() == 1


def test_shift():
    p = Permutation.single_cycle([1, 2, 3])
    assert p.shift(3) == Permutation.single_cycle([4, 5, 6])
    assert Permutation.identity().shift(5).is_id()


def test_order_n_permutation():
    p = order_n_permutation(1, 5)
    assert p.pow(5).is_id()
    assert not p.pow(4).is_id()
    assert {p.pow(k).apply(0) for k in range(5)} == set(range(5))
    assert order_n_permutation(1, 1).is_id()


def test_cycles_round_trip():
    p = Permutation.from_cycles([[1, 4], [2, 6, 3]])
    assert Permutation.from_cycles(p.cycles()) == p


def test_hash_consistent_with_equality():
    a = Permutation.from_images([1, 0, 2, 3])
    b = Permutation.from_images([1, 0])
    assert len({a, b}) == 1


def test_simple_application():
    p = Permutation.from_images([2, 0, 1])
    action = SimpleApplication()
    assert [action.apply(p, i) for i in range(3)] == [p.apply(i) for i in range(3)]


def test_multiplication_action():
    p = Permutation.single_cycle([1, 2])
    e = Permutation.single_cycle([2, 3])
    assert MultiplicationAction().apply(p, e) == e.multiply(p)


def test_conjugation_action():
    p = Permutation.single_cycle([1, 2, 3, 4])
    g = Permutation.from_cycles([[1, 3], [2, 5]])
    c = ConjugationAction().apply(p, g)
    for x in range(6):
        assert c.apply(p.apply(x)) == p.apply(g.apply(x))
    assert ConjugationAction().apply(Permutation.identity(), g) == g
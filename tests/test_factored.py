from dataclasses import dataclass

import pytest

from permgroups.factored import (
    FactoredTransversal,
    FactoredTransversalResolver,
    factored_transversal,
    factored_transversal_complete_opt,
    representative_raw,
    representative_raw_as_word,
)
from permgroups.permutation import Permutation
from permgroups.transversal import InvalidLen, valid_transversal


@dataclass
class _Gens:
    generators: tuple


def _group(*perms):
    return _Gens(tuple(p for p in perms if not p.is_id()))


def _multi_gens():
    return [
        Permutation.from_cycles([[1, 6, 4, 3], [2, 7, 5]]),
        Permutation.from_cycles([[1, 4], [2, 6, 3]]),
    ]


def _disjoint_gens():
    return [Permutation.single_cycle([1, 2, 6]), Permutation.single_cycle([3, 5, 7])]


def test_multiple_generators():
    gens = _multi_gens()
    for i in range(6):
        fc = FactoredTransversal.from_generators(i, gens)
        for j in range(6):
            assert fc.in_orbit(j)
            assert fc.representative(j).apply(i) == j


def test_multiple_generators_non_full_orbit():
    gens = _disjoint_gens()
    fc1 = FactoredTransversal.from_generators(5, gens)
    fc2 = FactoredTransversal.from_generators(4, gens)
    fc3 = FactoredTransversal.from_generators(3, gens)
    assert len(fc1) == 3
    assert len(fc2) == 3
    assert len(fc3) == 1
    for i in (0, 1, 5):
        assert fc1.in_orbit(i)
        assert fc1.representative(i).apply(5) == i
        assert not fc2.in_orbit(i)
        assert fc2.representative(i) is None
        assert not fc3.in_orbit(i)
        assert fc3.representative(i) is None
    for i in (2, 4, 6):
        assert not fc1.in_orbit(i)
        assert fc1.representative(i) is None
        assert fc2.in_orbit(i)
        assert fc2.representative(i).apply(4) == i
        assert not fc3.in_orbit(i)
        assert fc3.representative(i) is None
    assert not fc1.in_orbit(3)
    assert fc1.representative(3) is None
    assert not fc2.in_orbit(3)
    assert fc2.representative(3) is None
    assert fc3.in_orbit(3)
    assert fc3.representative(3).apply(3) == 3


def test_id_transversal():
    fc = FactoredTransversal.from_group(_group(), 3)
    valid_transversal(fc)
    assert fc.base == 3
    assert fc.in_orbit(3)
    assert not fc.in_orbit(2)
    assert not fc.in_orbit(1)
    assert len(fc) == 1


def test_id_representatives():
    fc = FactoredTransversal.from_group(_group(), 3)
    valid_transversal(fc)
    assert fc.representative(3) == Permutation.identity()
    assert fc.representative(2) is None


def test_small_fc():
    fc = FactoredTransversal.from_group(_group(Permutation.from_images([0, 3, 2, 1])), 1)
    valid_transversal(fc)
    assert fc.base == 1
    assert fc.in_orbit(1)
    assert fc.in_orbit(3)
    assert not fc.in_orbit(0)
    assert not fc.in_orbit(2)
    assert len(fc) == 2


def test_full_cycle():
    fc = FactoredTransversal.from_group(_group(Permutation.from_images([1, 2, 3, 0])), 3)
    valid_transversal(fc)
    for i in range(4):
        assert fc.in_orbit(i)
        assert fc.representative(i).apply(3) == i
    assert len(fc) == 4


def test_stored_entries_are_generator_inverses():
    gens = _multi_gens()
    mapping = factored_transversal(_group(*gens), 0)
    inverses = {g.inv() for g in gens}
    assert mapping[0] == Permutation.identity()
    for point, stored in mapping.items():
        if point != 0:
            assert stored in inverses


def test_complete_opt_matches_full_orbit():
    group = _group(*_multi_gens())
    assert set(factored_transversal_complete_opt(group, 2)) == set(factored_transversal(group, 2))


def test_word_product_is_representative():
    group = _group(*_multi_gens())
    mapping = factored_transversal(group, 0)
    for point in mapping:
        word = representative_raw_as_word(mapping, 0, point)
        product = Permutation.identity()
        for factor in word:
            product = product.multiply(factor)
        assert product == representative_raw(mapping, 0, point)
        assert product.apply(0) == point


def test_word_missing_point():
    mapping = factored_transversal(_group(*_disjoint_gens()), 5)
    assert representative_raw_as_word(mapping, 5, 3) is None
    assert representative_raw_as_word(mapping, 5, 5) == []


def test_resolver_lookup():
    mapping = factored_transversal(_group(Permutation.from_images([1, 2, 3, 0])), 0)
    rep = FactoredTransversalResolver().representative(mapping, 0, 2)
    assert rep.apply(0) == 2


def test_empty_transversal_is_invalid():
    with pytest.raises(InvalidLen):
        valid_transversal(FactoredTransversal(0, {}))


def test_str_is_one_indexed():
    fc = FactoredTransversal.from_group(_group(), 0)
    assert str(fc) == "[FactoredTransversal: base := 1, elements := {(1, ()) }]"
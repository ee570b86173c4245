"""Permutation groups given by generators, with the standard families."""

from __future__ import annotations

import random
import warnings
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from .factored import FactoredTransversal
from .orbit import Orbit
from .permutation import (
    ConjugationAction,
    MultiplicationAction,
    Permutation,
    SimpleApplication,
    order_n_permutation,
)
from .random_perm import RandPerm
from .transversal import SimpleTransversal


class Group:
    """A group stored as a list of generators.

    Identity elements are dropped from the generators given to the constructor.
    """

    def __init__(self, generators: Iterable[Permutation] = ()) -> None:
        self.generators: list = [g for g in generators if not g.is_id()]

    @classmethod
    def from_list(cls, items: Iterable[Any]) -> Group:
        """Build from arbitrary elements, keeping them all (identities included)."""
        group = cls()
        group.generators = list(items)
        return group

    @classmethod
    def trivial(cls) -> Group:
        """The group holding only the identity."""
        return cls()

    @classmethod
    def klein_4(cls) -> Group:
        """The Klein four-group <(1 2), (3 4)>."""
        return cls([Permutation.single_cycle([1, 2]), Permutation.single_cycle([3, 4])])

    @classmethod
    def dihedral_2n(cls, n: int) -> Group:
        """The dihedral group of order 2n, the isometries of the regular n-gon."""
        if n < 1:
            raise ValueError("n must be positive")
        if n == 1:
            return cls.cyclic(2)
        if n == 2:
            return cls.klein_4()
        if n % 2 == 0:
            k = n // 2
            reflection = Permutation.from_cycles([i, 2 * k - i + 1] for i in range(1, k + 1))
        else:
            k = (n - 1) // 2
            reflection = Permutation.from_cycles([i, 2 * k - i + 3] for i in range(2, k + 2))
        return cls([reflection, order_n_permutation(1, n)])

    @classmethod
    def cyclic(cls, n: int) -> Group:
        """The cyclic group generated by the cycle (1 2 ... n)."""
        if n < 1:
            raise ValueError("n must be positive")
        return cls([order_n_permutation(1, n)])

    @classmethod
    def alternating(cls, n: int) -> Group:
        """The alternating group on n points, generated by 3-cycles."""
        if n < 1:
            raise ValueError("n must be positive")
        if n == 1:
            return cls.trivial()
        return cls(Permutation.single_cycle([1, 2, k]) for k in range(3, n + 1))

    @classmethod
    def symmetric(cls, n: int) -> Group:
        """The symmetric group on n points."""
        if n < 1:
            raise ValueError("n must be positive")
        if n == 1:
            return cls.trivial()
        return cls([Permutation.single_cycle([1, 2]), order_n_permutation(1, n)])

    def map(self, func: Callable[[Any], Any]) -> Group:
        """A group whose generators are ``func`` applied to these generators."""
        return Group.from_list(func(g) for g in self.generators)

    def deduplicate(self) -> Group:
        """The same group with repeated generators removed."""
        return Group.from_list(dict.fromkeys(self.generators))

    def rng(self) -> RandPerm:
        """A generator of random elements of this group."""
        return RandPerm(11, self, 50)

    def rng_with_source(self, rng: random.Random) -> RandPerm:
        """A generator of random elements using the given source of randomness."""
        return RandPerm(11, self, 50, rng)

    def orbit(self, base: int) -> Orbit:
        return Orbit.from_group(self, base)

    def orbit_of_action(self, base: Any, action: Any) -> Orbit:
        return Orbit.from_group(self, base, action)

    def transversal(self, base: int) -> SimpleTransversal:
        return SimpleTransversal.from_group(self, base, SimpleApplication())

    def transversal_of_action(self, base: Any, action: Any) -> SimpleTransversal:
        return SimpleTransversal.from_group(self, base, action)

    def factored_transversal(self, base: int) -> FactoredTransversal:
        return FactoredTransversal.from_group(self, base, SimpleApplication())

    def factored_transversal_of_action(self, base: Any, action: Any) -> FactoredTransversal:
        return FactoredTransversal.from_group(self, base, action)

    def bruteforce_elements(self) -> list:
        """Every element of the group, found as the orbit of the identity.

        Only practical for small groups.
        """
        return list(self.orbit_of_action(Permutation.identity(), MultiplicationAction()))

    def symmetric_super_order(self) -> int:
        """The smallest n such that the group lies in S_n."""
        moved = (g.lmp() for g in self.generators)
        return max((m for m in moved if m is not None), default=0) + 1

    def conjugate_gens(self, p: Permutation) -> Group:
        """The group with every generator conjugated by ``p``."""
        action = ConjugationAction()
        return self.map(lambda g: action.apply(p, g))

    @staticmethod
    def product(g1: Group, g2: Group) -> Group:
        """The direct product, with ``g2`` moved onto points past those of ``g1``."""
        if not g1.generators:
            return Group.from_list(g2.generators)
        if not g2.generators:
            return Group.from_list(g1.generators)
        n = g1.symmetric_super_order()
        return Group([*g1.generators, *(p.shift(n) for p in g2.generators)])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.generators == other.generators

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Group({self.generators!r})"

    def __str__(self) -> str:
        return "[Group: gens := <" + ", ".join(map(str, self.generators)) + ">]"


@dataclass(frozen=True)
class DecoratedGroup:
    """A group together with its known order."""

    group: Group
    order: int

    def map(self, func: Callable[[Any], Any]) -> DecoratedGroup:
        """Switch the representation of the generators, keeping the order."""
        return DecoratedGroup(self.group.map(func), self.order)


def group_elements(group: Group) -> list:
    """Every element of the group by naive closure. Prefer ``bruteforce_elements``."""
    warnings.warn(
        "group_elements is slow; use Group.bruteforce_elements instead",
        DeprecationWarning,
        stacklevel=2,
    )
    found: set = set()
    to_check = deque(g for g in group.generators if not g.is_id())
    while to_check:
        element = to_check.pop()
        found.add(element.inv())
        found.add(element)
        for other in found:
            new = element.multiply(other)
            if not new.is_id() and new not in found:
                to_check.append(new)
    found.add(Permutation.identity())
    return list(found)
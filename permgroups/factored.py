"""Factored transversals (Schreier vectors): orbits that store one generator per point."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .orbit import _super_order
from .permutation import Permutation, SimpleApplication
from .transversal import Transversal


@dataclass(frozen=True)
class _Generators:
    """A bare generating set, with identities removed."""

    generators: tuple = field(default_factory=tuple)

    @classmethod
    def of(cls, generators: Iterable[Permutation]) -> _Generators:
        return cls(tuple(g for g in generators if not g.is_id()))


def _walk(transversal: Mapping, base: Hashable, point: Hashable, action: Any) -> Iterable[Permutation]:
    """Yield the stored inverses met on the way from ``point`` back to ``base``."""
    action = action if action is not None else SimpleApplication()
    current = point
    while current != base:
        g_inv = transversal[current]
        yield g_inv
        current = action.apply(g_inv, current)


def representative_raw(
    transversal: Mapping, base: Hashable, point: Hashable, action: Any = None
) -> Permutation | None:
    """Rebuild the element taking ``base`` to ``point``, or None if ``point`` is not in the orbit."""
    if point not in transversal:
        return None
    rep = Permutation.identity()
    for g_inv in _walk(transversal, base, point, action):
        rep = rep.multiply(g_inv)
    # The walk collects inverses, so the product is the inverse of the representative.
    return rep.inv()


def representative_raw_as_word(
    transversal: Mapping, base: Hashable, point: Hashable, action: Any = None
) -> list[Permutation] | None:
    """The representative as a list of factors whose product (in order) takes base to point."""
    if point not in transversal:
        return None
    word = [g_inv.inv() for g_inv in _walk(transversal, base, point, action)]
    word.reverse()
    return word


def _explore(group: Any, base: Hashable, action: Any, limit: int | None) -> dict:
    action = action if action is not None else SimpleApplication()
    mapping: dict = {base: Permutation.identity()}
    pending = deque([base])
    while pending:
        delta = pending.popleft()
        for gen in group.generators:
            point = action.apply(gen, delta)
            if point not in mapping:
                pending.append(point)
                mapping[point] = gen.inv()
            if limit is not None and len(mapping) == limit:
                return mapping
    return mapping


def factored_transversal(group: Any, base: Hashable, action: Any = None) -> dict:
    """Map each orbit point to the inverse of the generator that first reached it."""
    return _explore(group, base, action, None)


def factored_transversal_complete_opt(group: Any, base: Hashable, action: Any = None) -> dict:
    """Like :func:`factored_transversal`, stopping once the orbit holds every possible point."""
    return _explore(group, base, action, _super_order(group))


@dataclass(frozen=True)
class FactoredTransversalResolver:
    """Rebuilds representatives by walking the Schreier vector back to the base."""

    action: Any = field(default_factory=SimpleApplication)

    def representative(self, mapping: Mapping, base: Hashable, point: Hashable) -> Any:
        return representative_raw(mapping, base, point, self.action)


class FactoredTransversal(Transversal):
    """Transversal that stores a single generator inverse for every orbit point."""

    _label = "FactoredTransversal"

    def __init__(self, base: Hashable, mapping: Mapping, action: Any = None) -> None:
        action = action if action is not None else SimpleApplication()
        super().__init__(base, mapping, FactoredTransversalResolver(action), action)

    @classmethod
    def from_group(cls, group: Any, base: Hashable, action: Any = None) -> FactoredTransversal:
        action = action if action is not None else SimpleApplication()
        return cls(base, factored_transversal(group, base, action), action)

    @classmethod
    def from_generators(cls, base: Hashable, generators: Iterable[Permutation]) -> FactoredTransversal:
        return cls.from_group(_Generators.of(generators), base)
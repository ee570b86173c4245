"""Orbits of points (or other objects) under a group of permutations."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import Any

from .permutation import SimpleApplication


def _super_order(group: Any) -> int:
    """The smallest n such that every generator lies in S_n."""
    return max((g.lmp() for g in group.generators if not g.is_id()), default=0) + 1


def orbit(group: Any, base: Hashable, action: Any = None) -> set:
    """Compute the orbit of ``base`` under the generators of ``group``."""
    action = action if action is not None else SimpleApplication()
    found = {base}
    pending = deque([base])
    while pending:
        delta = pending.popleft()
        for gen in group.generators:
            gamma = action.apply(gen, delta)
            if gamma not in found:
                found.add(gamma)
                pending.append(gamma)
    return found


def orbit_complete_opt(group: Any, base: Hashable, action: Any = None) -> set:
    """Compute the orbit, stopping as soon as it holds every possible point."""
    action = action if action is not None else SimpleApplication()
    maximal = _super_order(group)
    found = {base}
    pending = deque([base])
    while pending:
        delta = pending.popleft()
        for gen in group.generators:
            gamma = action.apply(gen, delta)
            if gamma not in found:
                found.add(gamma)
                pending.append(gamma)
            if len(found) == maximal:
                return found
    return found


@dataclass(frozen=True)
class Orbit:
    """The orbit of a base point: base^G = { base^g | g in G }."""

    base: Any
    points: frozenset

    @classmethod
    def from_group(cls, group: Any, base: Hashable, action: Any = None) -> Orbit:
        return cls(base, frozenset(orbit(group, base, action)))

    def complete(self, group: Any) -> bool:
        """True if the orbit holds every point the group can move."""
        return len(self.points) == _super_order(group)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator:
        return iter(self.points)

    def __contains__(self, point: object) -> bool:
        return point in self.points

    def __str__(self) -> str:
        if isinstance(self.base, int) and all(isinstance(p, int) for p in self.points):
            elements = ", ".join(str(p + 1) for p in sorted(self.points))
            return f"[Orbit: base := {self.base + 1}, elements := {{{elements}}} ]"
        elements = ", ".join(map(str, self.points))
        return f"[Orbit: base := {self.base}, elements := {{{elements}}} ]"
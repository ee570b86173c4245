"""Transversals: orbits together with a representative for every orbit point."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from .orbit import Orbit, _super_order
from .permutation import Permutation, SimpleApplication


class TransversalError(Exception):
    """A transversal failed validation."""


class BaseNotInOrbit(TransversalError):
    """The base point is missing from the orbit."""

    def __init__(self, point: Any) -> None:
        super().__init__(f"base {point!r} is not in the orbit")
        self.point = point


class MissingRepresentative(TransversalError):
    """A point of the orbit has no representative."""

    def __init__(self, point: Any) -> None:
        super().__init__(f"no representative for {point!r}")
        self.point = point


class InvalidRepresentative(TransversalError):
    """A representative does not map the base to its point."""

    def __init__(self, representative: Any, point: Any) -> None:
        super().__init__(f"representative {representative} does not map the base to {point!r}")
        self.representative = representative
        self.point = point


class InvalidLen(TransversalError):
    """The transversal is empty."""

    def __init__(self) -> None:
        super().__init__("transversal has length 0")


class MismatchedLen(TransversalError):
    """The transversal and its orbit differ in size."""

    def __init__(self, transversal_len: int, orbit_len: int) -> None:
        super().__init__(
            f"transversal has {transversal_len} entries but the orbit has {orbit_len}"
        )
        self.transversal_len = transversal_len
        self.orbit_len = orbit_len


@dataclass(frozen=True)
class SimpleTransversalResolver:
    """Looks representatives up directly in the stored mapping."""

    def representative(self, mapping: Mapping, base: Hashable, point: Hashable) -> Any:
        return mapping.get(point)


class Transversal:
    """An orbit of ``base`` stored as a mapping from points to stored elements.

    How a representative is recovered from the mapping is left to the resolver.
    """

    _label = "Transversal"

    def __init__(
        self,
        base: Hashable,
        mapping: Mapping,
        resolver: Any,
        action: Any = None,
    ) -> None:
        self.base = base
        self._mapping = dict(mapping)
        self.resolver = resolver
        self.action = action if action is not None else SimpleApplication()

    def representative(self, point: Hashable) -> Any:
        """An element taking the base to ``point``, or None if it is not in the orbit."""
        return self.resolver.representative(self._mapping, self.base, point)

    def in_orbit(self, point: Hashable) -> bool:
        return point in self._mapping

    def orbit(self) -> Orbit:
        return Orbit(self.base, frozenset(self._mapping))

    def __len__(self) -> int:
        return len(self._mapping)

    def elements(self) -> Iterator[tuple[Any, Any]]:
        """The stored (point, element) pairs."""
        return iter(self._mapping.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base={self.base!r}, size={len(self)})"

    def __str__(self) -> str:
        numeric = isinstance(self.base, int)
        shift = 1 if numeric else 0
        base = self.base + shift if numeric else self.base
        parts = "".join(
            f"({point + shift if isinstance(point, int) else point}, {element}) "
            for point, element in self._mapping.items()
        )
        return f"[{self._label}: base := {base}, elements := {{{parts}}}]"


class SimpleTransversal(Transversal):
    """Transversal that stores every representative in full."""

    def __init__(self, base: Hashable, mapping: Mapping, action: Any = None) -> None:
        super().__init__(base, mapping, SimpleTransversalResolver(), action)

    @classmethod
    def from_group(cls, group: Any, base: Hashable, action: Any = None) -> SimpleTransversal:
        action = action if action is not None else SimpleApplication()
        return cls(base, transversal(group, base, action), action)


def _explore(group: Any, base: Hashable, action: Any, limit: int | None) -> dict:
    action = action if action is not None else SimpleApplication()
    mapping: dict = {base: Permutation.identity()}
    pending = deque([base])
    while pending:
        delta = pending.popleft()
        for gen in group.generators:
            gamma = action.apply(gen, delta)
            if gamma not in mapping:
                pending.append(gamma)
                mapping[gamma] = mapping[delta].multiply(gen)
            if limit is not None and len(mapping) == limit:
                return mapping
    return mapping


def transversal(group: Any, base: Hashable, action: Any = None) -> dict:
    """Map every point of the orbit of ``base`` to an element taking base there."""
    return _explore(group, base, action, None)


def transversal_complete_opt(group: Any, base: Hashable, action: Any = None) -> dict:
    """Like :func:`transversal`, stopping once the orbit holds every possible point."""
    return _explore(group, base, action, _super_order(group))


def valid_transversal(transv: Transversal) -> None:
    """Check a transversal, raising a :class:`TransversalError` if it is invalid."""
    orbit = transv.orbit()
    size, orbit_size = len(transv), len(orbit)
    if size == 0:
        raise InvalidLen()
    if size != orbit_size:
        raise MismatchedLen(size, orbit_size)

    base = transv.base
    if not transv.in_orbit(base):
        raise BaseNotInOrbit(base)

    for point in orbit:
        rep = transv.representative(point)
        if rep is None:
            raise MissingRepresentative(point)
        if transv.action.apply(rep, base) != point:
            raise InvalidRepresentative(rep, point)
"""Permutations on the non-negative integers and the actions they induce."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any


class Permutation:
    """An immutable permutation of the points 0, 1, 2, ...

    Points past the stored images are fixed.  Products compose left to right:
    ``p.multiply(q)`` applies ``p`` first and then ``q``.
    """

    __slots__ = ("_images",)

    def __init__(self, images: Iterable[int] = ()) -> None:
        images = list(images)
        while images and images[-1] == len(images) - 1:
            images.pop()
        self._images: tuple[int, ...] = tuple(images)

    @classmethod
    def from_images(cls, images: Sequence[int]) -> Permutation:
        """Build from the list of images of 0, 1, ..., n - 1."""
        images = list(images)
        if sorted(images) != list(range(len(images))):
            raise ValueError(f"not a permutation of 0..{len(images) - 1}: {images!r}")
        return cls(images)

    @classmethod
    def identity(cls) -> Permutation:
        return cls()

    @classmethod
    def from_cycles(cls, cycles: Iterable[Sequence[int]]) -> Permutation:
        """Build from disjoint cycles written on the points 1, 2, 3, ..."""
        mapping: dict[int, int] = {}
        seen: set[int] = set()
        for cycle in cycles:
            for point in cycle:
                if point < 1:
                    raise ValueError(f"cycle points start at 1, got {point}")
                if point in seen:
                    raise ValueError(f"point {point} appears more than once")
                seen.add(point)
            for src, dst in zip(cycle, [*cycle[1:], *cycle[:1]]):
                mapping[src - 1] = dst - 1
        size = max(mapping, default=-1) + 1
        return cls(mapping.get(i, i) for i in range(size))

    @classmethod
    def single_cycle(cls, cycle: Sequence[int]) -> Permutation:
        """Build from one cycle written on the points 1, 2, 3, ..."""
        return cls.from_cycles([cycle])

    @property
    def images(self) -> tuple[int, ...]:
        """Images of 0, 1, ..., up to the largest moved point."""
        return self._images

    def apply(self, point: int) -> int:
        if 0 <= point < len(self._images):
            return self._images[point]
        return point

    def multiply(self, other: Permutation) -> Permutation:
        size = max(len(self._images), len(other._images))
        return Permutation(other.apply(self.apply(i)) for i in range(size))

    def inv(self) -> Permutation:
        inverse = [0] * len(self._images)
        for point, image in enumerate(self._images):
            inverse[image] = point
        return Permutation(inverse)

    def pow(self, n: int) -> Permutation:
        base = self if n >= 0 else self.inv()
        exponent = abs(n)
        result = Permutation()
        while exponent:
            if exponent & 1:
                result = result.multiply(base)
            base = base.multiply(base)
            exponent >>= 1
        return result

    def is_id(self) -> bool:
        return not self._images

    def lmp(self) -> int | None:
        """Largest moved point, or None for the identity."""
        return len(self._images) - 1 if self._images else None

    def shift(self, n: int) -> Permutation:
        """Move the permutation to act on the points n, n + 1, ..."""
        if self.is_id():
            return self
        return Permutation([*range(n), *(image + n for image in self._images)])

    def cycles(self) -> list[tuple[int, ...]]:
        """Non-trivial cycles, on the points 1, 2, 3, ..."""
        result = []
        visited: set[int] = set()
        for start in range(len(self._images)):
            if start in visited or self._images[start] == start:
                continue
            cycle = []
            point = start
            while point not in visited:
                visited.add(point)
                cycle.append(point + 1)
                point = self._images[point]
            result.append(tuple(cycle))
        return result

    def __mul__(self, other: Permutation) -> Permutation:
        return self.multiply(other)

    def __pow__(self, n: int) -> Permutation:
        return self.pow(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._images == other._images

    def __hash__(self) -> int:
        return hash(self._images)

    def __repr__(self) -> str:
        return f"Permutation.from_images({list(self._images)!r})"

    def __str__(self) -> str:
        cycles = self.cycles()
        if not cycles:
            return "()"
        return "".join("(" + " ".join(map(str, c)) + ")" for c in cycles)


def order_n_permutation(start: int, n: int) -> Permutation:
    """The n-cycle (start, start + 1, ..., start + n - 1), on points from 1."""
    if n < 1:
        raise ValueError("n must be positive")
    return Permutation.single_cycle(list(range(start, start + n)))


@dataclass(frozen=True)
class SimpleApplication:
    """Permutations acting on points."""

    def apply(self, perm: Permutation, point: int) -> int:
        return perm.apply(point)


@dataclass(frozen=True)
class MultiplicationAction:
    """Permutations acting on permutations by right multiplication."""

    def apply(self, perm: Permutation, element: Any) -> Any:
        return element.multiply(perm)


@dataclass(frozen=True)
class ConjugationAction:
    """Permutations acting on permutations by conjugation."""

    def apply(self, perm: Permutation, element: Any) -> Any:
        return perm.inv().multiply(element).multiply(perm)
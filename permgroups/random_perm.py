"""Random elements of a permutation group."""

from __future__ import annotations

import random
from typing import Any

from .permutation import Permutation


class RandPerm:
    """Product-replacement generator of random group elements.

    Each call to :meth:`random_permutation` yields a new random element of the
    group generated by the given generators.
    """

    def __init__(
        self,
        min_size: int,
        group: Any,
        initial_runs: int,
        rng: random.Random | None = None,
    ) -> None:
        elements = list(group.generators) or [Permutation.identity()]
        k = len(elements)
        elements.extend(elements[i % k] for i in range(max(0, min_size - k)))
        self.size = max(min_size, k)
        if self.size < 2:
            raise ValueError("at least two slots are needed; raise min_size")
        self.rng = rng if rng is not None else random.Random()
        self._elements = elements
        self._accum = Permutation.identity()
        for _ in range(initial_runs):
            self.random_permutation()

    def random_permutation(self) -> Permutation:
        """Advance the generator and return the next random element."""
        s = self.rng.randrange(self.size)
        t = s
        while t == s:
            t = self.rng.randrange(self.size)
        exponent = 1 if self.rng.getrandbits(1) else -1
        factor = self._elements[t].pow(exponent)
        if self.rng.getrandbits(1):
            self._elements[s] = self._elements[s].multiply(factor)
            self._accum = self._accum.multiply(self._elements[s])
        else:
            self._elements[s] = factor.multiply(self._elements[s])
            self._accum = self._elements[s].multiply(self._accum)
        return self._accum


def random_cayley_walk(group: Any, iters: int, rng: random.Random) -> Permutation:
    """Random walk of ``iters`` steps on the Cayley graph of the group."""
    result = Permutation.identity()
    generators = list(group.generators)
    if not generators:
        return result
    for _ in range(iters):
        elem = rng.choice(generators)
        step = elem if rng.getrandbits(1) else elem.inv()
        result = result.multiply(step)
    return result


def random_lazy_cayley_walk(group: Any, iters: int, rng: random.Random) -> Permutation:
    """Random walk that at each step either stays put or moves along a generator."""
    result = Permutation.identity()
    generators = list(group.generators)
    if not generators:
        return result
    for _ in range(iters):
        if rng.getrandbits(1):
            result = result.multiply(rng.choice(generators))
    return result
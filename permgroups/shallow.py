"""Transversals with shallow Schreier trees, built with random group elements."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .factored import representative_raw_as_word as _factored_word
from .orbit import _super_order, orbit_complete_opt
from .permutation import Permutation, SimpleApplication
from .random_perm import RandPerm


@dataclass(frozen=True)
class _GeneratorSet:
    """A bare generating set, as seen by the orbit and random element routines."""

    generators: tuple = field(default_factory=tuple)


class Cube:
    """The cube-like structure of a sequence of elements acting on a base.

    Starting from ``{base}``, each element ``p`` of ``seq`` extends the current
    cube ``C`` to ``C ∪ C^p ∪ C^(p^-1)``.  While doing so, every newly reached
    point is recorded in ``orbit`` together with the element that takes it one
    step back towards the base, and in ``depth`` with its distance from the base.
    """

    def __init__(
        self,
        base: Hashable,
        seq: Sequence[Permutation],
        action: Any = None,
        orbit_size: int | None = None,
    ) -> None:
        action = action if action is not None else SimpleApplication()
        self.orbit: dict = {base: Permutation.identity()}
        self.depth: dict = {base: 0}
        current: set = {base}
        for p in seq:
            p_inv = p.inv()
            extended: set = set()
            for point in current:
                # Forward image: going back uses the inverse.
                image = action.apply(p, point)
                if image not in self.orbit:
                    self.depth[image] = self.depth[point] + 1
                    self.orbit[image] = p_inv
                extended.add(image)
                # Backward image: going back uses p itself.
                image = action.apply(p_inv, point)
                if image not in self.orbit:
                    self.depth[image] = self.depth[point] + 1
                    self.orbit[image] = p
                extended.add(image)
            extended |= current
            current = extended
            if orbit_size is not None and len(self.orbit) == orbit_size:
                break
        self.cube: set = current


def _bfs_with_depths(
    group: Any, base: Hashable, action: Any, limit: int
) -> tuple[dict, dict]:
    mapping: dict = {base: Permutation.identity()}
    depths: dict = {base: 0}
    pending = deque([base])
    while pending:
        delta = pending.popleft()
        for gen in group.generators:
            point = action.apply(gen, delta)
            if point not in mapping:
                depths[point] = depths[delta] + 1
                pending.append(point)
                mapping[point] = gen.inv()
            if len(mapping) == limit:
                return mapping, depths
    return mapping, depths


def random_transversal_naive(
    group: Any,
    base: Hashable,
    action: Any,
    rng: random.Random,
    set_depth: int,
) -> tuple[dict, int]:
    """Build a factored transversal whose tree has depth at most ``set_depth``.

    While the Schreier tree is too deep, a random group element is added to the
    generators of ``group`` and the tree is rebuilt.  Returns the transversal
    mapping and the depth of its tree.
    """
    action = action if action is not None else SimpleApplication()
    generators = list(group.generators)
    changed = False
    while True:
        view = _GeneratorSet(tuple(generators))
        mapping, depths = _bfs_with_depths(view, base, action, _super_order(view))
        max_depth = max(depths.values())
        if max_depth <= set_depth:
            break
        new_gen = RandPerm(10, view, 50, rng).random_permutation()
        if new_gen not in generators:
            generators.append(new_gen)
            changed = True
    if changed:
        group.generators = generators
    return mapping, max_depth


def shallow_transversal(
    group: Any,
    base: Hashable,
    action: Any,
    rng: random.Random,
) -> tuple[dict, dict]:
    """Randomised shallow transversal construction (Cooperman et al., 1990).

    Random elements are collected until their cube covers the whole orbit of
    ``base``; they then replace the generators of ``group``.  Returns the
    transversal mapping and the depth of every orbit point.
    """
    action = action if action is not None else SimpleApplication()
    original = [g for g in group.generators if not g.is_id()]
    if not original:
        raise ValueError("the group is trivial; no non-identity element exists")
    orbit_size = len(orbit_complete_opt(group, base, action))
    rand = RandPerm(11, _GeneratorSet(tuple(original)), 50, rng)

    initial = rand.random_permutation()
    while initial.is_id():
        initial = rand.random_permutation()
    sequence = [initial]
    cube = Cube(base, sequence, action, orbit_size)
    while len(cube.cube) != orbit_size:
        element = rand.random_permutation()
        if element.is_id():
            element = rng.choice(original)
        if element not in sequence:
            sequence.append(element)
            cube = Cube(base, sequence, action, orbit_size)

    group.generators = sequence
    return cube.orbit, cube.depth


def representative_raw_as_word(
    transversal: Mapping,
    base: Hashable,
    point: Hashable,
    action: Any = None,
    depth: int = 0,
) -> list[Permutation] | None:
    """The representative of ``point`` as a list of factors, or None outside the orbit.

    The product of the factors, in order, takes ``base`` to ``point``; ``depth``
    is the depth of the Schreier tree and bounds the number of factors.
    """
    if depth < 0:
        raise ValueError("depth must be non-negative")
    return _factored_word(transversal, base, point, action)
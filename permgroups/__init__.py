"""Permutation groups: permutations, orbits, transversals and random elements."""

__version__ = "0.1.2"
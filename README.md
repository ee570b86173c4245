# permgroups

A small pure-Python library for computing with permutation groups given by
generators: permutations and the actions they induce, orbits, transversals
(plain and factored, i.e. Schreier vectors), shallow transversals, and
product-replacement random elements. It has no dependencies outside the
standard library.

Points are numbered from 0. Cycle notation, as accepted by
`Permutation.from_cycles` and `Permutation.single_cycle` and as printed by
`str(permutation)`, is numbered from 1.

## Installation

```
pip install permgroups
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `permgroups.permutation` | `Permutation`, `order_n_permutation`, and the actions `SimpleApplication`, `MultiplicationAction`, `ConjugationAction` |
| `permgroups.orbit` | `Orbit`, `orbit`, `orbit_complete_opt` |
| `permgroups.transversal` | `Transversal`, `SimpleTransversal`, `SimpleTransversalResolver`, `transversal`, `transversal_complete_opt`, `valid_transversal` and the `TransversalError` family |
| `permgroups.factored` | `FactoredTransversal`, `FactoredTransversalResolver`, `factored_transversal`, `factored_transversal_complete_opt`, `representative_raw`, `representative_raw_as_word` |
| `permgroups.random_perm` | `RandPerm`, `random_cayley_walk`, `random_lazy_cayley_walk` |
| `permgroups.shallow` | `Cube`, `random_transversal_naive`, `shallow_transversal`, `representative_raw_as_word` |
| `permgroups.group` | `Group`, `DecoratedGroup`, `group_elements` |

## Quick tour

```python
from permgroups.permutation import Permutation
from permgroups.group import Group

# Standard groups
s4 = Group.symmetric(4)
d10 = Group.dihedral_2n(5)
a5 = Group.alternating(5)
k4 = Group.klein_4()

# Permutations from images (0-based) or cycles (1-based)
p = Permutation.from_images([1, 2, 0])
q = Permutation.single_cycle([1, 2, 3])
assert p == q
assert p.apply(0) == 1
assert p.pow(3).is_id()
assert str(p) == "(1 2 3)"

# Products apply the left factor first: (p * r).apply(x) == r.apply(p.apply(x))
r = Permutation.single_cycle([1, 2])
assert (p * r).apply(0) == r.apply(p.apply(0))

# Orbits
orb = s4.orbit(0)
assert len(orb) == 4 and 3 in orb

# Transversals: a representative mapping the base to each orbit point
t = s4.factored_transversal(0)
for point in t.orbit():
    assert t.representative(point).apply(0) == point
assert t.representative(7) is None

# Brute-force enumeration (small groups only)
assert len(s4.bruteforce_elements()) == 24

# Direct products move the second factor past the points of the first
prod = Group.product(Group.symmetric(4), Group.symmetric(3))
assert len(prod.bruteforce_elements()) == 24 * 6
```

`Group(...)` drops identity elements from the generators it is given;
`Group.from_list(...)` keeps every item as given. Other group helpers are
`map`, `deduplicate`, `conjugate_gens`, `symmetric_super_order` (the smallest
`n` with the group inside S_n), and the `*_of_action` variants of `orbit`,
`transversal` and `factored_transversal`, which take any object with an
`apply(perm, element)` method as the action.

`DecoratedGroup(group, order)` pairs a group with an order supplied by the
caller; the order is stored, not checked. `group_elements(group)` enumerates a
group by naive closure and emits a `DeprecationWarning`; prefer
`Group.bruteforce_elements()`.

### Random elements

`Group.rng()` returns a `RandPerm`, a product-replacement generator of random
group elements; `Group.rng_with_source(rng)` does the same with a
`random.Random` you supply, which makes results reproducible.

```python
import random
from permgroups.group import Group

g = Group.symmetric(6)
gen = g.rng_with_source(random.Random(1))
x = gen.random_permutation()
```

`RandPerm(min_size, group, initial_runs, rng=None)` raises `ValueError` if it
would have fewer than two slots. `permgroups.random_perm` also provides
`random_cayley_walk(group, iters, rng)` and
`random_lazy_cayley_walk(group, iters, rng)`.

### Validating transversals

`permgroups.transversal.valid_transversal(transv)` returns `None` for a valid
transversal and otherwise raises a `TransversalError` subclass describing the
first problem found: `InvalidLen`, `MismatchedLen`, `BaseNotInOrbit`,
`MissingRepresentative` or `InvalidRepresentative`.

### Shallow transversals

`permgroups.shallow` builds Schreier vectors with bounded tree depth:

- `random_transversal_naive(group, base, action, rng, set_depth)` adds random
  group elements to `group.generators` until the tree has depth at most
  `set_depth`, and returns the mapping and its depth.
- `shallow_transversal(group, base, action, rng)` collects random elements
  until their `Cube` covers the orbit, replaces `group.generators` with them,
  and returns the mapping and the depth of every orbit point. It raises
  `ValueError` for a trivial group.

Both functions change the generators of the group passed in. Representatives
are rebuilt from their mappings with `permgroups.factored.representative_raw`.

## What this package does not do

It does not build stabilizer chains, so it cannot compute the order of a
group, test whether a permutation belongs to a group, or test whether one
group is a subgroup of another, other than by enumerating every element with
`bruteforce_elements`. It has no command-line program and does not read or
write group libraries from files.
"""Cost algebras: the arithmetic every search algorithm is generic over.

A `CostAlgebra` bundles an identity element, an addition function and a
three-way comparison. Algorithms never touch cost values directly; they only
combine and order them through the algebra, so any type with a lawful
``(zero, add, compare)`` triple can serve as an edge weight.

Preconditions (not checked at runtime):
    - ``add`` is associative.
    - For Dijkstra, A* and Floyd-Warshall, adding a weight never makes a
      cost compare lower than before (non-negative contributions).
      Bellman-Ford and SPFA admit negative contributions.

Violating them yields wrong answers, not exceptions.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from functools import cmp_to_key, reduce
from typing import Any, Callable, Generic, Iterable, Tuple, TypeVar

C = TypeVar("C")

#: Three-way comparison: negative if a < b, zero if equal, positive if a > b.
Compare = Callable[[Any, Any], int]


@dataclass(frozen=True)
class CostAlgebra(Generic[C]):
    """Identity, addition and total order for an opaque cost type.

    Attributes:
        zero: Identity element of ``add``; the cost of an empty path.
        add: Associative combination of two costs.
        compare: Three-way comparison following the ``functools.cmp_to_key``
            convention.
    """

    zero: C
    add: Callable[[C, C], C]
    compare: Compare

    def less(self, a: C, b: C) -> bool:
        return self.compare(a, b) < 0

    def min(self, a: C, b: C) -> C:
        """Return the smaller cost, preferring ``a`` on ties."""
        return b if self.compare(b, a) < 0 else a

    def fold(self, costs: Iterable[C]) -> C:
        """Left-fold ``costs`` with ``add`` starting from ``zero``."""
        return reduce(self.add, costs, self.zero)

    def sort_key(self) -> Callable[[C], Any]:
        """Return a key function ordering costs by ``compare``."""
        return cmp_to_key(self.compare)


def _numeric_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


#: Default algebra for ``int`` and ``float`` weights.
NUMERIC: CostAlgebra = CostAlgebra(zero=0, add=operator.add, compare=_numeric_compare)


def lexicographic(*algebras: CostAlgebra) -> CostAlgebra[Tuple[Any, ...]]:
    """Combine component algebras into one over tuples.

    Tuples add component-wise and compare lexicographically, first component
    first. Useful for tie-breaking objectives such as (distance, hops).

    Args:
        *algebras: One algebra per tuple position.

    Returns:
        CostAlgebra whose zero is the tuple of component zeros.

    Raises:
        ValueError: If no component algebras are given.
    """
    if not algebras:
        raise ValueError("lexicographic() requires at least one component algebra.")

    def add(a: Tuple[Any, ...], b: Tuple[Any, ...]) -> Tuple[Any, ...]:
        return tuple(alg.add(x, y) for alg, x, y in zip(algebras, a, b))

    def compare(a: Tuple[Any, ...], b: Tuple[Any, ...]) -> int:
        for alg, x, y in zip(algebras, a, b):
            order = alg.compare(x, y)
            if order:
                return order
        return 0

    return CostAlgebra(
        zero=tuple(alg.zero for alg in algebras), add=add, compare=compare
    )

"""Lightweight representation of a single search path.

The ``Path`` dataclass stores the ordered node sequence from source to goal
and the accumulated cost. ``path_weight`` recomputes that cost from a graph,
which lets callers (and the test suite) verify that a returned path is
consistent with the edges it claims to traverse.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Any, Iterator, Optional, Sequence, Tuple

from costsearch.algebra import NUMERIC, CostAlgebra

if TYPE_CHECKING:
    from costsearch.algorithms.base import NodeID, SuccessorGraph


@dataclass(frozen=True)
class Path:
    """A source-to-goal node sequence and its total cost.

    Attributes:
        nodes: Node ids from source to goal, both inclusive. Never empty.
        total_weight: Fold of edge weights along consecutive node pairs.
    """

    nodes: Tuple[NodeID, ...]
    total_weight: Any

    def __post_init__(self) -> None:
        if not self.nodes:
            raise ValueError("Path requires at least one node.")
        if not isinstance(self.nodes, tuple):
            object.__setattr__(self, "nodes", tuple(self.nodes))

    def __getitem__(self, idx: int) -> NodeID:
        return self.nodes[idx]

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def src_node(self) -> NodeID:
        """Return the first node in the path (the source node)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeID:
        """Return the last node in the path (the goal node)."""
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        """Return the number of edges traversed."""
        return len(self.nodes) - 1

    @cached_property
    def edges_seq(self) -> Tuple[Tuple[NodeID, NodeID], ...]:
        """Return consecutive ``(u, v)`` pairs along the path.

        Returns:
            A tuple of node pairs; empty for a single-node path.
        """
        return tuple(zip(self.nodes, self.nodes[1:]))


def path_weight(
    graph: SuccessorGraph,
    nodes: Sequence[NodeID],
    algebra: CostAlgebra = NUMERIC,
) -> Any:
    """Recompute the cost of walking ``nodes`` through ``graph``.

    For each hop the cheapest parallel edge is used, matching what the
    search algorithms relax.

    Args:
        graph: Graph exposing ``weighted_successors``.
        nodes: Node sequence to walk.
        algebra: Cost algebra used to combine and order weights.

    Returns:
        The algebra fold of the selected edge weights.

    Raises:
        ValueError: If ``nodes`` is empty or some hop has no edge.
    """
    if not nodes:
        raise ValueError("Cannot weigh an empty node sequence.")

    total = algebra.zero
    for u, v in zip(nodes, nodes[1:]):
        best: Optional[Any] = None
        found = False
        for neighbor, cost in graph.weighted_successors(u):
            if neighbor != v:
                continue
            best = cost if not found else algebra.min(best, cost)
            found = True
        if not found:
            raise ValueError(f"No edge from '{u}' to '{v}'.")
        total = algebra.add(total, best)
    return total

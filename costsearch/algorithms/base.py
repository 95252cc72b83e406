"""Shared types for the search algorithms."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Iterator, Protocol, Sequence, Tuple

#: Opaque, hashable node identifier of an explicit graph.
NodeID = Hashable

#: Estimated remaining cost from a node to the goal: ``heuristic(node, goal)``.
Heuristic = Callable[[Any, Any], Any]

#: Implicit-graph successor function: ``successors(state) -> [(state, cost), ...]``.
Successors = Callable[[Any], Iterable[Tuple[Any, Any]]]

#: Implicit-graph goal predicate.
GoalPredicate = Callable[[Any], bool]

#: Projection of a state to the key used for visited tracking.
VisitedBy = Callable[[Any], Hashable]


class SuccessorGraph(Protocol):
    """What the explicit-graph algorithms need from a graph.

    `StrictMultiDiGraph` satisfies it; so does any object offering the same
    four methods. ``weighted_successors`` must be side-effect free.
    """

    def __iter__(self) -> Iterator[NodeID]: ...

    def __contains__(self, node: object) -> bool: ...

    def __len__(self) -> int: ...

    def weighted_successors(self, node: NodeID) -> Sequence[Tuple[NodeID, Any]]: ...


def iter_edges(graph: SuccessorGraph) -> Iterator[Tuple[NodeID, NodeID, Any]]:
    """Yield every edge of ``graph`` as ``(u, v, cost)`` in node order."""
    for u in graph:
        for v, cost in graph.weighted_successors(u):
            yield u, v, cost

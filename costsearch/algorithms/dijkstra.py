"""Best-first search over explicit graphs: Dijkstra and A*.

Both algorithms share one loop. The frontier carries the full path prefix
as payload, so the path is available the moment the goal is popped and no
predecessor map is needed.

Stale entries are handled lazily: a node is pushed again every time its
tentative cost strictly improves, and entries whose cost is worse than the
best known one are dropped when popped.

Notes:
    Edge weights must be non-negative under the algebra (adding a weight
    never lowers a cost). Use `bellman_ford` otherwise.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from costsearch.algebra import NUMERIC, CostAlgebra
from costsearch.algorithms.base import Heuristic, NodeID, SuccessorGraph
from costsearch.frontier import Frontier
from costsearch.logging import get_logger
from costsearch.path import Path

logger = get_logger(__name__)


def _check_source(graph: SuccessorGraph, source: NodeID) -> None:
    if source not in graph:
        raise KeyError(f"Source node '{source}' is not in the graph.")


def _best_first(
    graph: SuccessorGraph,
    source: NodeID,
    goal: NodeID,
    algebra: CostAlgebra,
    heuristic: Optional[Heuristic],
) -> Optional[Path]:
    _check_source(graph, source)

    def priority(cost: Any, node: NodeID) -> Any:
        if heuristic is None:
            return cost
        return algebra.add(cost, heuristic(node, goal))

    best: Dict[NodeID, Any] = {source: algebra.zero}
    frontier: Frontier[Any, Tuple[Any, Tuple[NodeID, ...]]] = Frontier(algebra)
    frontier.push(priority(algebra.zero, source), (algebra.zero, (source,)))
    expansions = 0

    while frontier:
        _, (cost, prefix) = frontier.pop()
        node = prefix[-1]
        # Superseded by a cheaper entry pushed later; this also covers nodes
        # already expanded at an equal or better cost.
        if algebra.less(best[node], cost):
            continue
        if node == goal:
            logger.debug(
                "Reached %r from %r after %d expansions", goal, source, expansions
            )
            return Path(prefix, cost)
        expansions += 1

        for neighbor, weight in graph.weighted_successors(node):
            new_cost = algebra.add(cost, weight)
            if neighbor in best and not algebra.less(new_cost, best[neighbor]):
                continue
            best[neighbor] = new_cost
            frontier.push(priority(new_cost, neighbor), (new_cost, prefix + (neighbor,)))

    logger.debug("No path from %r to %r (%d expansions)", source, goal, expansions)
    return None


def shortest_path(
    graph: SuccessorGraph,
    source: NodeID,
    goal: NodeID,
    algebra: CostAlgebra = NUMERIC,
) -> Optional[Path]:
    """Find a least-cost path with Dijkstra's algorithm.

    Among several equally short paths, the one whose entries were pushed
    first wins; the choice is deterministic for a fixed graph and algebra.

    Args:
        graph: Graph exposing ``weighted_successors``.
        source: Start node.
        goal: Target node.
        algebra: Cost algebra; weights must be non-negative under it.

    Returns:
        The shortest ``Path``, or None if ``goal`` is unreachable.

    Raises:
        KeyError: If ``source`` is not in the graph.
    """
    return _best_first(graph, source, goal, algebra, heuristic=None)


def a_star(
    graph: SuccessorGraph,
    source: NodeID,
    goal: NodeID,
    heuristic: Heuristic,
    algebra: CostAlgebra = NUMERIC,
) -> Optional[Path]:
    """Find a least-cost path with A* search.

    Frontier priority is ``cost_so_far + heuristic(node, goal)``.

    Precondition: ``heuristic`` is admissible, i.e. it never overestimates
    the true remaining cost to ``goal``. This is not verified; an
    overestimating heuristic can return a longer-than-optimal path.
    Consistency is not required: a node reached later at a lower cost is
    expanded again.

    Args:
        graph: Graph exposing ``weighted_successors``.
        source: Start node.
        goal: Target node.
        heuristic: ``heuristic(node, goal) -> cost`` estimate.
        algebra: Cost algebra; weights must be non-negative under it.

    Returns:
        The shortest ``Path``, or None if ``goal`` is unreachable.

    Raises:
        KeyError: If ``source`` is not in the graph.
    """
    return _best_first(graph, source, goal, algebra, heuristic=heuristic)


def single_source_distances(
    graph: SuccessorGraph,
    source: NodeID,
    algebra: CostAlgebra = NUMERIC,
) -> Dict[NodeID, Any]:
    """Compute least costs from ``source`` to every reachable node.

    Args:
        graph: Graph exposing ``weighted_successors``.
        source: Start node.
        algebra: Cost algebra; weights must be non-negative under it.

    Returns:
        Mapping of each reachable node (``source`` included, at ``zero``) to
        its distance. Unreachable nodes are omitted.

    Raises:
        KeyError: If ``source`` is not in the graph.
    """
    _check_source(graph, source)

    best: Dict[NodeID, Any] = {source: algebra.zero}
    settled: Dict[NodeID, Any] = {}
    frontier: Frontier[Any, NodeID] = Frontier(algebra)
    frontier.push(algebra.zero, source)

    while frontier:
        cost, node = frontier.pop()
        if node in settled or algebra.less(best[node], cost):
            continue
        settled[node] = cost

        for neighbor, weight in graph.weighted_successors(node):
            new_cost = algebra.add(cost, weight)
            if neighbor in best and not algebra.less(new_cost, best[neighbor]):
                continue
            best[neighbor] = new_cost
            frontier.push(new_cost, neighbor)

    return settled

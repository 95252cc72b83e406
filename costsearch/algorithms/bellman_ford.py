"""Bellman-Ford single-pair shortest path with negative-cycle detection."""

from __future__ import annotations

from typing import Any, Dict, List

from costsearch.algebra import NUMERIC, CostAlgebra
from costsearch.algorithms.base import NodeID, SuccessorGraph, iter_edges
from costsearch.algorithms.negative_cycle import has_relaxable_edge, relax_edge
from costsearch.logging import get_logger
from costsearch.path import Path
from costsearch.results import BellmanFordResult, NegativeCycle, NoPath, ShortestPath

logger = get_logger(__name__)


def bellman_ford(
    graph: SuccessorGraph,
    source: NodeID,
    goal: NodeID,
    algebra: CostAlgebra = NUMERIC,
) -> BellmanFordResult:
    """Find a least-cost path, allowing negative edge weights.

    Runs up to ``|V| - 1`` relaxation passes over every edge (stopping once
    a pass changes nothing), then one detection pass. If any edge still
    relaxes, a negative cycle is reachable from ``source`` and the result is
    `NegativeCycle` even when ``goal`` itself was reached.

    Args:
        graph: Graph exposing ``weighted_successors``.
        source: Start node.
        goal: Target node.
        algebra: Cost algebra; negative contributions are allowed.

    Returns:
        `ShortestPath`, `NegativeCycle` or `NoPath`.

    Raises:
        KeyError: If ``source`` is not in the graph.
    """
    if source not in graph:
        raise KeyError(f"Source node '{source}' is not in the graph.")

    dist: Dict[NodeID, Any] = {source: algebra.zero}
    pred: Dict[NodeID, NodeID] = {}

    passes = 0
    for _ in range(len(graph) - 1):
        passes += 1
        changed = False
        for u, v, weight in iter_edges(graph):
            if relax_edge(dist, u, v, weight, algebra):
                pred[v] = u
                changed = True
        if not changed:
            break

    if has_relaxable_edge(iter_edges(graph), dist, algebra):
        logger.debug(
            "Negative cycle reachable from %r after %d relaxation passes",
            source,
            passes,
        )
        return NegativeCycle()

    if goal not in dist:
        return NoPath()

    nodes: List[NodeID] = [goal]
    while nodes[-1] != source:
        nodes.append(pred[nodes[-1]])
    nodes.reverse()
    return ShortestPath(Path(tuple(nodes), dist[goal]))

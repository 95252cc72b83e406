"""All-pairs shortest paths: Floyd-Warshall and the POI distance matrix."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from costsearch.algebra import NUMERIC, CostAlgebra
from costsearch.algorithms.base import NodeID, SuccessorGraph
from costsearch.algorithms.dijkstra import single_source_distances
from costsearch.config import SEARCH_CONFIG, MatrixStrategy, SearchConfig
from costsearch.logging import get_logger
from costsearch.results import AllPairsResult, Distances, NegativeCycle

logger = get_logger(__name__)


def floyd_warshall(
    graph: SuccessorGraph,
    algebra: CostAlgebra = NUMERIC,
) -> AllPairsResult:
    """Compute least costs between every ordered pair of nodes.

    Initialization:
      - ``(i, i)`` starts at the lesser of ``zero`` and the cheapest
        self-loop on ``i``, so a negative self-loop shows up on the
        diagonal while a positive one is ignored.
      - ``(i, j)`` starts at the cheapest parallel edge from ``i`` to ``j``.

    Args:
        graph: Graph exposing ``weighted_successors``.
        algebra: Cost algebra; negative contributions are allowed.

    Returns:
        Mapping ``{(from, to): cost}`` with unreachable pairs omitted, or
        `NegativeCycle` if any diagonal entry ends up below ``zero``.
    """
    nodes: List[NodeID] = list(graph)
    dist: Dict[NodeID, Dict[NodeID, Any]] = {u: {u: algebra.zero} for u in nodes}

    for u in nodes:
        row = dist[u]
        for v, weight in graph.weighted_successors(u):
            row[v] = algebra.min(row[v], weight) if v in row else weight

    for k in nodes:
        row_k = dist[k]
        for i in nodes:
            row_i = dist[i]
            if k not in row_i:
                continue
            d_ik = row_i[k]
            for j, d_kj in row_k.items():
                candidate = algebra.add(d_ik, d_kj)
                if j not in row_i or algebra.less(candidate, row_i[j]):
                    row_i[j] = candidate

    for u in nodes:
        if algebra.less(dist[u][u], algebra.zero):
            logger.debug("Negative cycle through %r detected by Floyd-Warshall", u)
            return NegativeCycle()

    return {(u, v): cost for u in nodes for v, cost in dist[u].items()}


def distance_matrix(
    graph: SuccessorGraph,
    points_of_interest: Iterable[NodeID],
    algebra: CostAlgebra = NUMERIC,
    strategy: MatrixStrategy = MatrixStrategy.AUTO,
    config: SearchConfig = SEARCH_CONFIG,
) -> AllPairsResult:
    """Compute least costs between every ordered pair of points of interest.

    Two strategies give the same distances on any graph with non-negative
    weights:
      - DENSE runs `floyd_warshall` once and keeps POI x POI pairs.
      - SPARSE runs `single_source_distances` from each POI.

    With ``MatrixStrategy.AUTO``, DENSE is used when
    ``|POI| * config.dense_crossover_factor > |V|``. The crossover only
    trades running time; it never changes the answer.

    Only DENSE detects negative cycles. SPARSE assumes non-negative weights
    like Dijkstra does.

    Args:
        graph: Graph exposing ``weighted_successors``.
        points_of_interest: Nodes to compute distances between; duplicates
            are ignored.
        algebra: Cost algebra.
        strategy: Force DENSE or SPARSE, or let AUTO decide.
        config: Crossover tuning.

    Returns:
        Mapping ``{(from, to): cost}`` restricted to POI pairs (unreachable
        pairs omitted), or `NegativeCycle`.

    Raises:
        KeyError: If a point of interest is not in the graph.
        ValueError: If ``strategy`` is not a valid MatrixStrategy.
    """
    pois: List[NodeID] = list(dict.fromkeys(points_of_interest))
    missing = [p for p in pois if p not in graph]
    if missing:
        raise KeyError(f"Points of interest not in the graph: {missing}")

    strategy = MatrixStrategy(strategy)
    if strategy == MatrixStrategy.AUTO:
        strategy = config.select_strategy(len(pois), len(graph))
    logger.debug(
        "distance_matrix: %d POIs over %d nodes using %s",
        len(pois),
        len(graph),
        strategy.name,
    )

    poi_set = set(pois)
    if strategy == MatrixStrategy.DENSE:
        all_pairs = floyd_warshall(graph, algebra)
        if isinstance(all_pairs, NegativeCycle):
            return all_pairs
        return {
            (u, v): cost
            for (u, v), cost in all_pairs.items()
            if u in poi_set and v in poi_set
        }

    result: Distances = {}
    for src in pois:
        reached = single_source_distances(graph, src, algebra)
        for dst in pois:
            if dst in reached:
                result[(src, dst)] = reached[dst]
    return result

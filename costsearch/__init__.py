"""costsearch: generic shortest-path and state-space search.

Every algorithm is generic over a cost algebra ``(zero, add, compare)``.
Plain ``int``/``float`` weights work with the default `NUMERIC` algebra.

Explicit graphs:
    shortest_path(), a_star() - Dijkstra / A*, returning Path or None
    single_source_distances() - Dijkstra distances from one node
    bellman_ford() - ShortestPath | NegativeCycle | NoPath
    floyd_warshall() - all-pairs distances or NegativeCycle
    distance_matrix() - POI-restricted all-pairs distances

Implicit graphs (caller-generated state spaces):
    implicit_dijkstra[_by](), implicit_a_star[_by]() - goal cost or None
    implicit_bellman_ford[_by]() - FoundGoal | DetectedNegativeCycle | NoGoal

Example:
    from costsearch import StrictMultiDiGraph, shortest_path

    g = StrictMultiDiGraph()
    for n in (1, 2, 3):
        g.add_node(n)
    g.add_edge(1, 2, cost=5)
    g.add_edge(2, 3, cost=3)
    g.add_edge(1, 3, cost=10)

    shortest_path(g, 1, 3)  # Path(nodes=(1, 2, 3), total_weight=8)
"""

from __future__ import annotations

from costsearch import logging
from costsearch._version import __version__
from costsearch.algebra import NUMERIC, CostAlgebra, lexicographic
from costsearch.algorithms import (
    a_star,
    bellman_ford,
    distance_matrix,
    floyd_warshall,
    implicit_a_star,
    implicit_a_star_by,
    implicit_bellman_ford,
    implicit_bellman_ford_by,
    implicit_dijkstra,
    implicit_dijkstra_by,
    shortest_path,
    single_source_distances,
)
from costsearch.config import SEARCH_CONFIG, MatrixStrategy, SearchConfig
from costsearch.frontier import Frontier
from costsearch.graph import StrictMultiDiGraph, from_networkx, to_digraph
from costsearch.path import Path, path_weight
from costsearch.results import (
    DetectedNegativeCycle,
    FoundGoal,
    NegativeCycle,
    NoGoal,
    NoPath,
    ShortestPath,
)

__all__ = [
    # Version
    "__version__",
    # Cost algebra
    "CostAlgebra",
    "NUMERIC",
    "lexicographic",
    # Model
    "Path",
    "path_weight",
    "Frontier",
    "StrictMultiDiGraph",
    "from_networkx",
    "to_digraph",
    # Results
    "ShortestPath",
    "NegativeCycle",
    "NoPath",
    "FoundGoal",
    "DetectedNegativeCycle",
    "NoGoal",
    # Explicit search
    "shortest_path",
    "a_star",
    "single_source_distances",
    "bellman_ford",
    "floyd_warshall",
    "distance_matrix",
    # Implicit search
    "implicit_dijkstra",
    "implicit_dijkstra_by",
    "implicit_a_star",
    "implicit_a_star_by",
    "implicit_bellman_ford",
    "implicit_bellman_ford_by",
    # Configuration
    "MatrixStrategy",
    "SearchConfig",
    "SEARCH_CONFIG",
    # Utilities
    "logging",
]

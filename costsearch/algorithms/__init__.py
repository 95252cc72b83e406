"""Shortest-path and state-space search algorithms."""

from costsearch.algorithms.bellman_ford import bellman_ford
from costsearch.algorithms.dijkstra import a_star, shortest_path, single_source_distances
from costsearch.algorithms.floyd_warshall import distance_matrix, floyd_warshall
from costsearch.algorithms.implicit import (
    implicit_a_star,
    implicit_a_star_by,
    implicit_bellman_ford,
    implicit_bellman_ford_by,
    implicit_dijkstra,
    implicit_dijkstra_by,
)

__all__ = [
    "a_star",
    "bellman_ford",
    "distance_matrix",
    "floyd_warshall",
    "implicit_a_star",
    "implicit_a_star_by",
    "implicit_bellman_ford",
    "implicit_bellman_ford_by",
    "implicit_dijkstra",
    "implicit_dijkstra_by",
    "shortest_path",
    "single_source_distances",
]

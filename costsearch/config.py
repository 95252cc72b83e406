"""Configuration classes for costsearch components."""

from dataclasses import dataclass
from enum import IntEnum


class MatrixStrategy(IntEnum):
    """How `distance_matrix` computes distances between points of interest."""

    #: Pick DENSE or SPARSE from the POI density.
    AUTO = 0
    #: One Floyd-Warshall run over the whole graph, filtered to POI pairs.
    DENSE = 1
    #: One single-source Dijkstra per POI.
    SPARSE = 2


@dataclass
class SearchConfig:
    """Tuning knobs for search strategy selection.

    None of these affect results, only which algorithm computes them.
    """

    # DENSE is chosen when poi_count * dense_crossover_factor > node_count
    dense_crossover_factor: int = 3

    def select_strategy(self, poi_count: int, node_count: int) -> MatrixStrategy:
        """Choose a concrete distance-matrix strategy for the given sizes."""
        if poi_count * self.dense_crossover_factor > node_count:
            return MatrixStrategy.DENSE
        return MatrixStrategy.SPARSE


# Global configuration instance
SEARCH_CONFIG = SearchConfig()

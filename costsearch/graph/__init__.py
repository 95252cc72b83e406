"""Graph storage for explicit-graph search.

This package provides the strict multi-directed graph type
`StrictMultiDiGraph` and NetworkX conversion helpers (`convert`).
"""

from costsearch.graph.convert import from_networkx, to_digraph
from costsearch.graph.strict_multidigraph import (
    AttrDict,
    EdgeID,
    NodeID,
    StrictMultiDiGraph,
)

__all__ = [
    "AttrDict",
    "EdgeID",
    "NodeID",
    "StrictMultiDiGraph",
    "from_networkx",
    "to_digraph",
]

"""Conversion between StrictMultiDiGraph and NetworkX graphs.

`from_networkx` imports any NetworkX graph as a searchable
`StrictMultiDiGraph`; `to_digraph` collapses parallel edges to the cheapest
one so results can be cross-checked against NetworkX's own algorithms.
"""

from __future__ import annotations

from typing import Any, Union

import networkx as nx

from costsearch.algebra import NUMERIC, CostAlgebra
from costsearch.graph.strict_multidigraph import DEFAULT_COST_ATTR, StrictMultiDiGraph

NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]


def from_networkx(
    nx_graph: NxGraph,
    cost_attr: str = DEFAULT_COST_ATTR,
    default_cost: Any = None,
) -> StrictMultiDiGraph:
    """Build a StrictMultiDiGraph from a NetworkX graph.

    Node attributes and edge attributes are copied. Undirected edges become
    a pair of opposite directed edges; an undirected self-loop stays a single
    edge.

    Args:
        nx_graph: Source graph of any NetworkX flavor.
        cost_attr: Edge attribute holding the cost.
        default_cost: Cost assigned to edges missing ``cost_attr``. When None,
            such edges are copied without a cost and ignored by searches.

    Returns:
        A new StrictMultiDiGraph with ``cost_attr`` set as its graph attribute.
    """
    graph = StrictMultiDiGraph(cost_attr=cost_attr)
    for node, data in nx_graph.nodes(data=True):
        graph.add_node(node, **data)

    directed = nx_graph.is_directed()
    for u, v, data in nx_graph.edges(data=True):
        attrs = dict(data)
        if default_cost is not None:
            attrs.setdefault(cost_attr, default_cost)
        graph.add_edge(u, v, **attrs)
        if not directed and u != v:
            graph.add_edge(v, u, **dict(attrs))
    return graph


def to_digraph(
    graph: StrictMultiDiGraph,
    algebra: CostAlgebra = NUMERIC,
) -> nx.DiGraph:
    """Collapse a StrictMultiDiGraph into a NetworkX DiGraph.

    Each ``(u, v)`` pair keeps only the cheapest parallel edge cost, stored
    under the graph's ``cost_attr``.

    Args:
        graph: Graph to convert.
        algebra: Algebra used to pick the cheapest parallel edge.

    Returns:
        A NetworkX DiGraph with one edge per connected ordered pair.
    """
    cost_attr = graph.cost_attr
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.nodes(data=True))

    for u in graph:
        for v, cost in graph.weighted_successors(u):
            if nx_graph.has_edge(u, v):
                current = nx_graph.edges[u, v][cost_attr]
                nx_graph.edges[u, v][cost_attr] = algebra.min(current, cost)
            else:
                nx_graph.add_edge(u, v, **{cost_attr: cost})
    return nx_graph

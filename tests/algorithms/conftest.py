"""Shared graph fixtures for algorithm tests."""

import random

import networkx as nx
import pytest

from costsearch.graph import StrictMultiDiGraph, from_networkx


def build(edges, nodes=()):
    g = StrictMultiDiGraph()
    for node in nodes:
        g.add_node(node)
    for u, v, cost in edges:
        for n in (u, v):
            if n not in g:
                g.add_node(n)
        g.add_edge(u, v, cost=cost)
    return g


def _random_graph(seed, n=10, p=0.3, max_cost=9):
    """Directed G(n, p) graph with integer costs in [0, max_cost]."""
    rng = random.Random(seed)
    nx_graph = nx.gnp_random_graph(n, p, seed=seed, directed=True)
    for u, v in nx_graph.edges:
        nx_graph[u][v]["cost"] = rng.randint(0, max_cost)
    return from_networkx(nx_graph)


@pytest.fixture
def graph_builder():
    return build


@pytest.fixture
def triangle():
    #        [5]      [3]
    #     1 ─────► 2 ─────► 3
    #     │                 ▲
    #     └─────────────────┘
    #            [10]
    return build([(1, 2, 5), (2, 3, 3), (1, 3, 10)])


@pytest.fixture
def square1():
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   C
    #   │   [2]        [2]  ▲
    #   └────────►D─────────┘
    return build([("A", "B", 1), ("B", "C", 1), ("A", "D", 2), ("D", "C", 2)])


@pytest.fixture
def square2():
    # Two equal-cost routes A->B->C and A->D->C.
    return build([("A", "B", 1), ("B", "C", 1), ("A", "D", 1), ("D", "C", 1)])


@pytest.fixture
def parallel():
    # Three parallel A->B edges plus a detour through C.
    g = build([("A", "B", 7), ("A", "B", 2), ("A", "B", 4), ("A", "C", 1), ("C", "B", 5)])
    return g


@pytest.fixture
def negative_edges():
    #   A ──[4]──► B ──[1]──► D
    #   │          ▲
    #  [2]       [-1]
    #   ▼          │
    #   C ─────────┘
    return build([("A", "B", 4), ("A", "C", 2), ("C", "B", -1), ("B", "D", 1)])


@pytest.fixture
def negative_cycle():
    # A -> B (1), B -> A (-2): cycle cost -1. C is isolated.
    return build([("A", "B", 1), ("B", "A", -2)], nodes=("C",))


@pytest.fixture
def grid():
    """4x3 grid of (x, y) nodes, unit cost in both directions (12 nodes)."""
    g = StrictMultiDiGraph()
    width, height = 4, 3
    for x in range(width):
        for y in range(height):
            g.add_node((x, y))
    for x in range(width):
        for y in range(height):
            for dx, dy in ((1, 0), (0, 1)):
                nx_, ny_ = x + dx, y + dy
                if nx_ < width and ny_ < height:
                    g.add_edge((x, y), (nx_, ny_), cost=1)
                    g.add_edge((nx_, ny_), (x, y), cost=1)
    return g


def _manhattan(node, goal):
    return abs(node[0] - goal[0]) + abs(node[1] - goal[1])


@pytest.fixture
def random_graph():
    """Factory for seeded random graphs: ``random_graph(seed, n=10, p=0.3)``."""
    return _random_graph


@pytest.fixture
def manhattan():
    """Admissible heuristic for the unit-cost grid."""
    return _manhattan

"""Tagged results for searches with more than one failure mode.

Unreachability and negative cycles are ordinary outcomes, returned as values
rather than raised. Each variant is a frozen dataclass so callers can branch
with ``isinstance`` or structural ``match``:

    match bellman_ford(graph, "A", "D"):
        case ShortestPath(path):
            ...
        case NegativeCycle():
            ...
        case NoPath():
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Tuple, Union

from costsearch.path import Path


@dataclass(frozen=True)
class ShortestPath:
    """A shortest path was found."""

    path: Path


@dataclass(frozen=True)
class NegativeCycle:
    """A negative cycle is reachable, so shortest paths are undefined."""


@dataclass(frozen=True)
class NoPath:
    """The goal is not reachable from the source."""


@dataclass(frozen=True)
class FoundGoal:
    """An implicit search reached a goal state at ``cost``."""

    cost: Any


@dataclass(frozen=True)
class DetectedNegativeCycle:
    """An implicit search found a cost-decreasing cycle among its states."""


@dataclass(frozen=True)
class NoGoal:
    """The implicit state space was exhausted without reaching a goal."""


BellmanFordResult = Union[ShortestPath, NegativeCycle, NoPath]

ImplicitBellmanFordResult = Union[FoundGoal, DetectedNegativeCycle, NoGoal]

#: All-pairs distances keyed by ``(from, to)``; absent pairs are unreachable.
Distances = Dict[Tuple[Hashable, Hashable], Any]

AllPairsResult = Union[Distances, NegativeCycle]

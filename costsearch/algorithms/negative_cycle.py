"""Negative-cycle detection shared by the Bellman-Ford family.

Two detectors are provided:

- `has_relaxable_edge`: the classic extra pass. After ``|V| - 1`` full
  relaxation passes every shortest path has settled, so any edge that still
  relaxes proves a reachable negative cycle.
- `RelaxationCounter`: for SPFA over implicit state spaces, where ``|V|`` is
  unknown up front. Each key remembers how many relaxations the chain that
  produced its current cost contains. A chain can only become as long as
  the number of keys discovered so far by revisiting a key, and a chain
  that revisits a key at a strictly lower cost closes a negative cycle.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, MutableMapping, Tuple

from costsearch.algebra import CostAlgebra


def relax_edge(
    dist: MutableMapping[Hashable, Any],
    u: Hashable,
    v: Hashable,
    weight: Any,
    algebra: CostAlgebra,
) -> bool:
    """Relax edge ``u -> v`` in place.

    Args:
        dist: Best known costs; nodes without an entry are unreached.
        u: Edge tail; nothing happens when it is unreached.
        v: Edge head.
        weight: Edge cost.
        algebra: Cost algebra.

    Returns:
        True if ``dist[v]`` was lowered or set.
    """
    if u not in dist:
        return False
    candidate = algebra.add(dist[u], weight)
    if v in dist and not algebra.less(candidate, dist[v]):
        return False
    dist[v] = candidate
    return True


def has_relaxable_edge(
    edges: Iterable[Tuple[Hashable, Hashable, Any]],
    dist: MutableMapping[Hashable, Any],
    algebra: CostAlgebra,
) -> bool:
    """Return True if any edge would still lower a reached node's cost.

    ``dist`` is not modified.
    """
    for u, v, weight in edges:
        if u not in dist:
            continue
        candidate = algebra.add(dist[u], weight)
        if v not in dist or algebra.less(candidate, dist[v]):
            return True
    return False


class RelaxationCounter:
    """Tracks relaxation-chain lengths per key for SPFA cycle detection."""

    def __init__(self) -> None:
        self._counts: Dict[Hashable, int] = {}

    def discover(self, key: Hashable) -> None:
        """Register the search's starting key."""
        self._counts.setdefault(key, 0)

    def record(self, key: Hashable, chain_length: int) -> bool:
        """Record that ``key`` now holds a cost produced by ``chain_length`` relaxations.

        ``chain_length`` is the relaxing key's own count plus one, taken
        when that key's cost was read.

        Returns:
            True if the chain is now at least as long as the number of
            distinct keys discovered, which can only happen through a
            negative cycle.
        """
        self._counts[key] = chain_length
        return chain_length >= len(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __getitem__(self, key: Hashable) -> int:
        return self._counts[key]

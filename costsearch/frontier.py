"""Priority frontier with lazy stale-entry handling.

Entries are never removed or re-prioritized once pushed. Search loops push a
fresh entry on every relaxation and discard superseded ones when they are
popped, comparing against their own best-known map.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Any, Generic, List, Tuple, TypeVar

from costsearch.algebra import NUMERIC, CostAlgebra

C = TypeVar("C")
P = TypeVar("P")


class Frontier(Generic[C, P]):
    """Binary min-heap of ``(priority, payload)`` entries.

    Priorities are ordered by the algebra's ``compare``. Equal priorities pop
    in insertion order, so a search over a fixed input is deterministic.
    Payloads are never compared.
    """

    def __init__(self, algebra: CostAlgebra = NUMERIC) -> None:
        self._key = algebra.sort_key()
        self._heap: List[Tuple[Any, int, C, P]] = []
        self._seq = count()

    def push(self, priority: C, payload: P) -> None:
        heappush(self._heap, (self._key(priority), next(self._seq), priority, payload))

    def pop(self) -> Tuple[C, P]:
        """Remove and return the lowest-priority entry.

        Raises:
            IndexError: If the frontier is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        _, _, priority, payload = heappop(self._heap)
        return priority, payload

    def peek_priority(self) -> C:
        """Return the lowest priority without removing its entry.

        Raises:
            IndexError: If the frontier is empty.
        """
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

import operator

import pytest

from costsearch.algebra import NUMERIC, CostAlgebra
from costsearch.frontier import Frontier


def test_pops_in_priority_order():
    frontier = Frontier()
    for priority, payload in ((5, "e"), (1, "a"), (3, "c"), (2, "b")):
        frontier.push(priority, payload)
    assert [frontier.pop() for _ in range(4)] == [(1, "a"), (2, "b"), (3, "c"), (5, "e")]


def test_equal_priorities_pop_in_insertion_order():
    frontier = Frontier()
    for payload in ("first", "second", "third"):
        frontier.push(7, payload)
    assert [frontier.pop()[1] for _ in range(3)] == ["first", "second", "third"]


def test_payloads_are_never_compared():
    frontier = Frontier()
    frontier.push(1, {"unorderable": True})
    frontier.push(1, {"unorderable": False})
    assert frontier.pop() == (1, {"unorderable": True})


def test_stale_duplicates_are_kept():
    frontier = Frontier()
    frontier.push(4, "node")
    frontier.push(2, "node")
    assert len(frontier) == 2
    assert frontier.pop() == (2, "node")
    assert frontier.pop() == (4, "node")


def test_custom_algebra_ordering():
    max_first = CostAlgebra(zero=0, add=operator.add, compare=lambda a, b: NUMERIC.compare(b, a))
    frontier = Frontier(max_first)
    for p in (1, 9, 4):
        frontier.push(p, p)
    assert frontier.peek_priority() == 9
    assert [frontier.pop()[0] for _ in range(3)] == [9, 4, 1]


def test_empty_frontier():
    frontier = Frontier()
    assert not frontier
    assert len(frontier) == 0
    with pytest.raises(IndexError):
        frontier.pop()
    with pytest.raises(IndexError):
        frontier.peek_priority()

"""Tests for implicit-graph search over caller-generated state spaces."""

import pytest

from costsearch.algebra import NUMERIC, lexicographic
from costsearch.algorithms.implicit import (
    implicit_a_star,
    implicit_a_star_by,
    implicit_bellman_ford,
    implicit_bellman_ford_by,
    implicit_dijkstra,
    implicit_dijkstra_by,
)
from costsearch.results import DetectedNegativeCycle, FoundGoal, NoGoal


def count_up(n):
    return [(n + 1, 1)]


def at_five(n):
    return n == 5


def table_successors(table):
    return lambda state: table.get(state, [])


def grid_successors(state):
    """6x6 grid: unit orthogonal moves, diagonal moves at cost 3."""
    x, y = state
    moves = []
    for dx, dy, cost in ((1, 0, 1), (-1, 0, 1), (0, 1, 1), (0, -1, 1), (1, 1, 3)):
        nx_, ny_ = x + dx, y + dy
        if 0 <= nx_ < 6 and 0 <= ny_ < 6:
            moves.append(((nx_, ny_), cost))
    return moves


def to_corner(state):
    return (5 - state[0]) + (5 - state[1])


class TestCountingScenario:
    def test_dijkstra(self):
        assert implicit_dijkstra(0, count_up, at_five) == 5

    def test_a_star(self):
        assert implicit_a_star(0, count_up, at_five, lambda n: max(0, 5 - n)) == 5

    def test_bellman_ford(self):
        # count_up is infinite, so SPFA needs a bounded variant to converge.
        bounded = lambda n: count_up(n) if n < 10 else []  # noqa: E731
        assert implicit_bellman_ford(0, bounded, at_five) == FoundGoal(5)

    def test_start_is_goal(self):
        assert implicit_dijkstra(5, count_up, at_five) == 0
        assert implicit_bellman_ford(5, lambda n: [], at_five) == FoundGoal(0)


class TestNoGoal:
    successors = staticmethod(lambda n: [(n + 1, 1)] if n < 3 else [])

    def test_dijkstra(self):
        assert implicit_dijkstra(0, self.successors, lambda n: n == 10) is None

    def test_a_star(self):
        assert implicit_a_star(0, self.successors, lambda n: n == 10, lambda n: 0) is None

    def test_bellman_ford(self):
        assert implicit_bellman_ford(0, self.successors, lambda n: n == 10) == NoGoal()


class TestGridSearch:
    def test_a_star_matches_dijkstra(self):
        goal = lambda s: s == (5, 5)  # noqa: E731
        assert implicit_dijkstra((0, 0), grid_successors, goal) == 10
        assert implicit_a_star((0, 0), grid_successors, goal, to_corner) == 10

    def test_bellman_ford_matches_dijkstra(self):
        goal = lambda s: s == (5, 5)  # noqa: E731
        assert implicit_bellman_ford((0, 0), grid_successors, goal) == FoundGoal(10)

    def test_heuristic_receives_states(self):
        seen = []

        def heuristic(state):
            seen.append(state)
            return to_corner(state)

        implicit_a_star((0, 0), grid_successors, lambda s: s == (5, 5), heuristic)
        assert seen and all(isinstance(s, tuple) and len(s) == 2 for s in seen)

    def test_lexicographic_costs(self):
        alg = lexicographic(NUMERIC, NUMERIC)

        def successors(state):
            pos, hops = state
            return [((nxt, hops + 1), (cost, 1)) for nxt, cost in grid_successors(pos)]

        cost = implicit_dijkstra_by(
            ((0, 0), 0),
            successors,
            lambda s: s[0],
            lambda s: s[0] == (5, 5),
            algebra=alg,
        )
        assert cost == (10, 10)


class TestKeyedDeduplication:
    """States carry a step counter that must not fragment the visited set."""

    @staticmethod
    def walker(calls):
        def successors(state):
            assert isinstance(state, tuple)
            calls.append(state)
            pos, steps = state
            moves = []
            if pos < 5:
                moves.append(((pos + 1, steps + 1), 2))
            if pos > 0:
                moves.append(((pos - 1, steps + 1), 1))
            return moves

        return successors

    def test_dijkstra_by_expands_each_key_once(self):
        calls = []
        cost = implicit_dijkstra_by(
            (0, 0), self.walker(calls), lambda s: s[0], lambda s: s[0] == 5
        )
        assert cost == 10
        positions = [pos for pos, _ in calls]
        assert len(positions) == len(set(positions))

    def test_goal_predicate_sees_full_state(self):
        seen = []

        def is_goal(state):
            seen.append(state)
            return state[0] == 5

        implicit_dijkstra_by((0, 0), self.walker([]), lambda s: s[0], is_goal)
        assert (5, 5) in seen

    def test_a_star_by(self):
        calls = []
        cost = implicit_a_star_by(
            (0, 0),
            self.walker(calls),
            lambda s: s[0],
            lambda s: s[0] == 5,
            lambda s: 2 * (5 - s[0]),
        )
        assert cost == 10
        positions = [pos for pos, _ in calls]
        assert len(positions) == len(set(positions))

    def test_bellman_ford_by_terminates_on_unbounded_payload(self):
        # Without the key projection the step counter makes every state new.
        result = implicit_bellman_ford_by(
            (0, 0), self.walker([]), lambda s: s[0], lambda s: s[0] == 5
        )
        assert result == FoundGoal(10)

    def test_key_distinct_from_state_equality(self):
        # Same position reached with different payloads keeps the cheaper one.
        table = {
            ("start", "x"): [(("mid", "a"), 5), (("mid", "b"), 1)],
            ("mid", "a"): [(("end", "a"), 1)],
            ("mid", "b"): [(("end", "b"), 1)],
        }
        succ = table_successors(table)
        key = lambda s: s[0]  # noqa: E731
        goal = lambda s: s[0] == "end"  # noqa: E731
        assert implicit_dijkstra_by(("start", "x"), succ, key, goal) == 2
        assert implicit_bellman_ford_by(("start", "x"), succ, key, goal) == FoundGoal(2)


class TestImplicitBellmanFord:
    def test_negative_edges(self):
        succ = table_successors({0: [(1, 4), (2, 1)], 2: [(1, -2)], 1: [(3, 1)]})
        assert implicit_bellman_ford(0, succ, lambda s: s == 3) == FoundGoal(0)

    def test_negative_cycle_detected(self):
        succ = table_successors({0: [(1, 1)], 1: [(0, -2), (2, 1)]})
        assert implicit_bellman_ford(0, succ, lambda s: s == 2) == DetectedNegativeCycle()

    def test_negative_cycle_detected_without_reachable_goal(self):
        succ = table_successors({0: [(1, 1)], 1: [(0, -2)]})
        assert implicit_bellman_ford(0, succ, lambda s: s == 99) == DetectedNegativeCycle()

    def test_negative_self_loop_detected(self):
        succ = table_successors({0: [(1, 1)], 1: [(1, -1)]})
        assert implicit_bellman_ford(0, succ, lambda s: s == 1) == DetectedNegativeCycle()

    def test_zero_cost_cycle_is_not_negative(self):
        succ = table_successors({0: [(1, 0)], 1: [(0, 0), (2, 1)]})
        assert implicit_bellman_ford(0, succ, lambda s: s == 2) == FoundGoal(1)

    def test_long_negative_chain_is_not_a_cycle(self):
        succ = lambda n: [(n + 1, -1)] if n < 9 else []  # noqa: E731
        assert implicit_bellman_ford(0, succ, lambda n: n == 9) == FoundGoal(-9)

    def test_cheapest_of_several_goals(self):
        succ = table_successors({0: [(1, 5), (2, 1)], 2: [(3, 1)]})
        goals = {1, 3}
        assert implicit_bellman_ford(0, succ, lambda s: s in goals) == FoundGoal(2)

    @pytest.mark.parametrize("target", [(5, 5), (3, 1), (0, 4)])
    def test_agrees_with_dijkstra(self, target):
        goal = lambda s: s == target  # noqa: E731
        expected = implicit_dijkstra((0, 0), grid_successors, goal)
        assert implicit_bellman_ford((0, 0), grid_successors, goal) == FoundGoal(expected)

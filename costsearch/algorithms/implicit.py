"""Search over implicit graphs: state spaces generated on demand.

Instead of a materialized graph and a goal node, these functions take:

- ``start``: the initial state.
- ``successors(state)``: iterable of ``(next_state, cost)`` pairs.
- ``is_goal(state)``: goal predicate.

The ``_by`` variants also take ``visited_by(state) -> key``. Visited
tracking and best-cost bookkeeping use the key, while ``successors`` and
``is_goal`` always receive the full state. This lets states carry payload
(remaining fuel, collected items, a step counter) without fragmenting the
visited set.

Nothing here bounds the search. On an infinite state space without a
reachable goal, Dijkstra and A* run forever; encode depth or cost ceilings
in ``successors``/``is_goal`` when that matters.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Dict, Hashable, Optional, Set, Tuple

from costsearch.algebra import NUMERIC, CostAlgebra
from costsearch.algorithms.base import GoalPredicate, Successors, VisitedBy
from costsearch.algorithms.negative_cycle import RelaxationCounter
from costsearch.frontier import Frontier
from costsearch.logging import get_logger
from costsearch.results import (
    DetectedNegativeCycle,
    FoundGoal,
    ImplicitBellmanFordResult,
    NoGoal,
)

logger = get_logger(__name__)


def _identity(state: Any) -> Any:
    return state


def _best_first(
    start: Any,
    successors: Successors,
    visited_by: VisitedBy,
    is_goal: GoalPredicate,
    heuristic: Optional[Callable[[Any], Any]],
    algebra: CostAlgebra,
) -> Optional[Any]:
    def priority(cost: Any, state: Any) -> Any:
        if heuristic is None:
            return cost
        return algebra.add(cost, heuristic(state))

    best: Dict[Hashable, Any] = {visited_by(start): algebra.zero}
    expanded: Dict[Hashable, Any] = {}
    frontier: Frontier[Any, Tuple[Any, Any]] = Frontier(algebra)
    frontier.push(priority(algebra.zero, start), (algebra.zero, start))

    while frontier:
        _, (cost, state) = frontier.pop()
        key = visited_by(state)
        if algebra.less(best[key], cost):
            continue
        if key in expanded and not algebra.less(cost, expanded[key]):
            continue
        if is_goal(state):
            return cost
        expanded[key] = cost

        for next_state, weight in successors(state):
            new_cost = algebra.add(cost, weight)
            next_key = visited_by(next_state)
            if next_key in best and not algebra.less(new_cost, best[next_key]):
                continue
            best[next_key] = new_cost
            frontier.push(priority(new_cost, next_state), (new_cost, next_state))

    logger.debug("Implicit search exhausted %d keys without a goal", len(expanded))
    return None


def implicit_dijkstra(
    start: Any,
    successors: Successors,
    is_goal: GoalPredicate,
    algebra: CostAlgebra = NUMERIC,
) -> Optional[Any]:
    """Return the least cost from ``start`` to any goal state.

    Weights must be non-negative under ``algebra``.

    Returns:
        The goal cost, or None if the reachable state space holds no goal.
    """
    return _best_first(start, successors, _identity, is_goal, None, algebra)


def implicit_dijkstra_by(
    start: Any,
    successors: Successors,
    visited_by: VisitedBy,
    is_goal: GoalPredicate,
    algebra: CostAlgebra = NUMERIC,
) -> Optional[Any]:
    """Like `implicit_dijkstra`, deduplicating states by ``visited_by(state)``.

    When two states share a key, only the cheaper one (or the first one
    found, on a tie) is expanded.
    """
    return _best_first(start, successors, visited_by, is_goal, None, algebra)


def implicit_a_star(
    start: Any,
    successors: Successors,
    is_goal: GoalPredicate,
    heuristic: Callable[[Any], Any],
    algebra: CostAlgebra = NUMERIC,
) -> Optional[Any]:
    """Return the least cost to a goal state using A*.

    Precondition: ``heuristic(state)`` never overestimates the remaining
    cost to the nearest goal. This is not checked.

    Returns:
        The goal cost, or None if the reachable state space holds no goal.
    """
    return _best_first(start, successors, _identity, is_goal, heuristic, algebra)


def implicit_a_star_by(
    start: Any,
    successors: Successors,
    visited_by: VisitedBy,
    is_goal: GoalPredicate,
    heuristic: Callable[[Any], Any],
    algebra: CostAlgebra = NUMERIC,
) -> Optional[Any]:
    """Like `implicit_a_star`, deduplicating states by ``visited_by(state)``."""
    return _best_first(start, successors, visited_by, is_goal, heuristic, algebra)


def _spfa(
    start: Any,
    successors: Successors,
    visited_by: VisitedBy,
    is_goal: GoalPredicate,
    algebra: CostAlgebra,
) -> ImplicitBellmanFordResult:
    start_key = visited_by(start)
    dist: Dict[Hashable, Any] = {start_key: algebra.zero}
    states: Dict[Hashable, Any] = {start_key: start}
    counter = RelaxationCounter()
    counter.discover(start_key)

    queue: Deque[Hashable] = deque([start_key])
    queued: Set[Hashable] = {start_key}

    while queue:
        key = queue.popleft()
        queued.discard(key)
        cost = dist[key]
        chain_length = counter[key] + 1

        for next_state, weight in successors(states[key]):
            next_key = visited_by(next_state)
            candidate = algebra.add(cost, weight)
            if next_key in dist and not algebra.less(candidate, dist[next_key]):
                continue
            dist[next_key] = candidate
            states[next_key] = next_state
            if counter.record(next_key, chain_length):
                logger.debug(
                    "Negative cycle detected at %r after discovering %d keys",
                    next_key,
                    len(counter),
                )
                return DetectedNegativeCycle()
            if next_key not in queued:
                queue.append(next_key)
                queued.add(next_key)

    found = False
    best_cost: Any = None
    for key, state in states.items():
        if not is_goal(state):
            continue
        if not found or algebra.less(dist[key], best_cost):
            best_cost = dist[key]
            found = True

    return FoundGoal(best_cost) if found else NoGoal()


def implicit_bellman_ford(
    start: Any,
    successors: Successors,
    is_goal: GoalPredicate,
    algebra: CostAlgebra = NUMERIC,
) -> ImplicitBellmanFordResult:
    """Return the least cost to a goal state, allowing negative weights.

    Runs SPFA (a FIFO work-queue Bellman-Ford) to convergence over every
    state reachable from ``start``, then reports the cheapest goal state.
    Negative cycles are detected by `RelaxationCounter` and stop the search,
    whether or not a goal is reachable.

    Returns:
        `FoundGoal`, `DetectedNegativeCycle` or `NoGoal`.
    """
    return _spfa(start, successors, _identity, is_goal, algebra)


def implicit_bellman_ford_by(
    start: Any,
    successors: Successors,
    visited_by: VisitedBy,
    is_goal: GoalPredicate,
    algebra: CostAlgebra = NUMERIC,
) -> ImplicitBellmanFordResult:
    """Like `implicit_bellman_ford`, deduplicating states by ``visited_by(state)``.

    Each key keeps the state that produced its current best cost; that
    state is the one expanded and tested with ``is_goal``.
    """
    return _spfa(start, successors, visited_by, is_goal, algebra)

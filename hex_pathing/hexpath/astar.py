from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Iterable, Protocol, TypeVar

from ..errors import InvalidNodeError, SearchTimeoutError
from .frontier import Frontier

NodeT = TypeVar("NodeT", bound=Hashable)


class SearchGraph(Protocol[NodeT]):
    """What a graph has to offer for :func:`astar` to search it."""

    def __contains__(self, node: object) -> bool: ...

    def is_passable(self, node: NodeT) -> bool: ...

    def neighbors(self, node: NodeT) -> Iterable[NodeT]: ...

    def cost_into(self, node: NodeT) -> float: ...

    def heuristic(self, node: NodeT, goal: NodeT) -> float: ...


@dataclass(frozen=True)
class Unreachable(Generic[NodeT]):
    """Result of a search whose goal cannot be reached from its start."""

    start: NodeT
    goal: NodeT

    def __bool__(self) -> bool:
        return False


def astar(
    graph: SearchGraph[NodeT],
    start: NodeT,
    goal: NodeT,
    *,
    should_stop: Callable[[], bool] | None = None,
) -> list[NodeT] | Unreachable[NodeT]:
    """Generic A* over any :class:`SearchGraph`.

    Returns the node list from ``start`` to ``goal`` inclusive, or an
    :class:`Unreachable` value when the frontier runs dry. ``should_stop`` is
    polled between pops; once it answers true the search raises
    :class:`~hex_pathing.errors.SearchTimeoutError`.
    """
    _check_endpoint(graph, start, "start")
    _check_endpoint(graph, goal, "goal")

    if start == goal:
        return [start]

    g_score: dict[NodeT, float] = {start: 0.0}
    came_from: dict[NodeT, NodeT] = {}
    frontier: Frontier[NodeT] = Frontier()
    frontier.push(start, 0.0, float(graph.heuristic(start, goal)))

    while frontier:
        if should_stop is not None and should_stop():
            raise SearchTimeoutError(f"search from {start!r} to {goal!r} was stopped")

        current, g = frontier.pop()
        if g > g_score[current]:
            continue  # superseded by a cheaper entry
        if current == goal:
            return _reconstruct(came_from, current)

        for nxt in graph.neighbors(current):
            tentative = g + float(graph.cost_into(nxt))
            if tentative < g_score.get(nxt, float("inf")):
                g_score[nxt] = tentative
                came_from[nxt] = current
                frontier.push(nxt, tentative, float(graph.heuristic(nxt, goal)))

    return Unreachable(start, goal)


def _check_endpoint(graph: SearchGraph[NodeT], node: NodeT, role: str) -> None:
    if node not in graph:
        raise InvalidNodeError(node, f"{role} is outside the graph")
    if not graph.is_passable(node):
        raise InvalidNodeError(node, f"{role} is impassable")


def _reconstruct(came_from: dict[NodeT, NodeT], goal: NodeT) -> list[NodeT]:
    rev = [goal]
    node = goal
    while node in came_from:
        node = came_from[node]
        rev.append(node)
    rev.reverse()
    return rev

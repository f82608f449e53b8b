"""
Hex-grid pathfinding facade.

Primary goals:
- Wrap the generic :func:`~hex_pathing.hexpath.astar.astar` engine for callers
  that hold a grid and ask for many paths over it.
- Cache results per ``(start, goal)``; a grid never changes after it is built,
  so the cache only needs clearing when the facade is pointed at a new grid.
- Offer an optional wall-clock limit that stops runaway searches.

Usage:
    grid = build_grid(8, 8, lambda x, z: 1.0)
    pf = PathFinder(grid)
    path = pf.find_path((0, 0), (7, 7))
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Hashable, Sequence, Tuple, TypeVar

from .hexpath.astar import SearchGraph, Unreachable, astar

logger = logging.getLogger(__name__)

NodeT = TypeVar("NodeT", bound=Hashable)


def find_path(
    graph: SearchGraph[NodeT],
    start: NodeT,
    goal: NodeT,
    *,
    time_limit: float | None = None,
) -> list[NodeT] | Unreachable[NodeT]:
    """
    Compute an optimal-cost path from start to goal over ``graph``.
    Returns the node list or :class:`Unreachable`; raises
    :class:`~hex_pathing.errors.InvalidNodeError` for bad endpoints.
    """
    should_stop = _deadline(time_limit) if time_limit is not None else None
    result = astar(graph, start, goal, should_stop=should_stop)
    if isinstance(result, Unreachable):
        logger.info("no path from %r to %r", start, goal)
    else:
        logger.debug("path %r -> %r: %d cells", start, goal, len(result))
    return result


def path_cost(graph: SearchGraph[NodeT], path: Sequence[NodeT]) -> float:
    """Sum of ``cost_into`` over every cell after the first."""
    return sum(float(graph.cost_into(node)) for node in path[1:])


class PathFinder:
    """
    Pathfinding facade bound to a single graph.

    - Delegates searches to the generic A* engine.
    - Caches results keyed on (start, goal).
    - Applies ``time_limit`` (seconds) to every uncached search.
    """

    def __init__(self, graph: SearchGraph, *, time_limit: float | None = None) -> None:
        if time_limit is not None and time_limit <= 0:
            raise ValueError("time_limit must be positive")
        self.graph = graph
        self.time_limit = time_limit
        self._cache: Dict[Tuple[Hashable, Hashable], tuple | Unreachable] = {}

    # --------- Public API ---------

    def find_path(self, start: Hashable, goal: Hashable) -> list | Unreachable:
        """
        Compute a path from start to goal. Returns a list of nodes or Unreachable.
        Cached by (start, goal); errors are never cached. Each call returns a
        new list, so callers may modify it freely.
        """
        key = (start, goal)
        cached = self._cache.get(key)
        if cached is None:
            result = find_path(self.graph, start, goal, time_limit=self.time_limit)
            cached = result if isinstance(result, Unreachable) else tuple(result)
            self._cache[key] = cached
        return cached if isinstance(cached, Unreachable) else list(cached)

    def path_cost(self, path: Sequence[Hashable]) -> float:
        return path_cost(self.graph, path)

    def invalidate(self) -> None:
        """
        Clear the internal path cache. Call after swapping ``graph``.
        """
        self._cache.clear()


def _deadline(time_limit: float) -> Callable[[], bool]:
    expires = time.monotonic() + time_limit

    def expired() -> bool:
        return time.monotonic() >= expires

    return expired


__all__ = ["PathFinder", "find_path", "path_cost"]

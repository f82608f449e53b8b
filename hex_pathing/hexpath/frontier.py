from __future__ import annotations

import heapq
from itertools import count
from typing import Generic, Hashable, List, Tuple, TypeVar

NodeT = TypeVar("NodeT", bound=Hashable)


class Frontier(Generic[NodeT]):
    """Open set ordered by f-score, then heuristic, then insertion order.

    A node may appear more than once after its g-score improves; callers pass
    the g-score along so stale entries can be recognised on pop.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, float, int, NodeT, float]] = []
        self._counter = count()

    def push(self, node: NodeT, g: float, h: float) -> None:
        heapq.heappush(self._heap, (g + h, h, next(self._counter), node, g))

    def pop(self) -> Tuple[NodeT, float]:
        """Remove the best entry and return ``(node, g)`` as it was pushed."""

        _, _, _, node, g = heapq.heappop(self._heap)
        return node, g

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

"""Tile selection state machine driving path requests.

The controller sits between input handling and the pathfinding core. It turns
a stream of tile clicks and resets into start/goal pairs and hands only those
two coordinates to :class:`~hex_pathing.PathFinder`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from hex_pathing import Coord, PathFinder, Unreachable

from .world.map import GameMap

logger = logging.getLogger(__name__)


class SelectionState(str, Enum):
    """Where the controller is in the start/goal selection cycle."""

    IDLE = "idle"  # a finished path is on display
    AWAITING_START = "awaiting_start"
    AWAITING_GOAL = "awaiting_goal"


_TRANSITIONS: dict[SelectionState, frozenset[SelectionState]] = {
    SelectionState.AWAITING_START: frozenset(
        {SelectionState.AWAITING_START, SelectionState.AWAITING_GOAL}
    ),
    SelectionState.AWAITING_GOAL: frozenset(
        {SelectionState.AWAITING_START, SelectionState.IDLE}
    ),
    SelectionState.IDLE: frozenset(
        {SelectionState.AWAITING_START, SelectionState.AWAITING_GOAL}
    ),
}


@dataclass(frozen=True)
class ClickResult:
    """Outcome of a single click, for the presentation layer to act on."""

    state: SelectionState
    accepted: bool
    path: tuple[Coord, ...] = ()
    unreachable: bool = False


class SelectionController:
    """Collects a start and a goal tile, then requests a path between them."""

    def __init__(self, game_map: GameMap, *, time_limit: float | None = None) -> None:
        self._time_limit = time_limit
        self._state = SelectionState.AWAITING_START
        self._start: Coord | None = None
        self._goal: Coord | None = None
        self._path: tuple[Coord, ...] = ()
        self.load_map(game_map)

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def start(self) -> Coord | None:
        return self._start

    @property
    def goal(self) -> Coord | None:
        return self._goal

    @property
    def path(self) -> tuple[Coord, ...]:
        return self._path

    @property
    def game_map(self) -> GameMap:
        return self._map

    def load_map(self, game_map: GameMap) -> None:
        """Swap in a freshly generated map and drop any selection."""

        self._map = game_map
        self._pathfinder = PathFinder(game_map.build_grid(), time_limit=self._time_limit)
        self.reset()

    def reset(self) -> None:
        """Clear the selection and any displayed path."""

        self._start = None
        self._goal = None
        self._path = ()
        self._transition(SelectionState.AWAITING_START)

    def click(self, coord: Coord) -> ClickResult:
        """Handle a click on ``coord``."""

        if not self._map.in_bounds(coord):
            logger.warning("ignoring click outside the map at %r", coord)
            return ClickResult(self._state, accepted=False, path=self._path)
        if not self._map.is_passable(coord):
            logger.warning("cannot move to %s tile at %r", self._map.terrain_at(*coord).value, coord)
            return ClickResult(self._state, accepted=False, path=self._path)

        if self._state is SelectionState.AWAITING_GOAL:
            return self._select_goal(coord)

        self._path = ()
        self._goal = None
        self._start = coord
        logger.debug("start selected at %r", coord)
        self._transition(SelectionState.AWAITING_GOAL)
        return ClickResult(self._state, accepted=True)

    def _select_goal(self, coord: Coord) -> ClickResult:
        assert self._start is not None
        # a search error leaves the start held and no goal recorded
        result = self._pathfinder.find_path(self._start, coord)
        if isinstance(result, Unreachable):
            logger.warning("path from %r to %r is unreachable", self._start, coord)
            self.reset()
            return ClickResult(self._state, accepted=True, unreachable=True)

        self._goal = coord
        self._path = tuple(result)
        self._transition(SelectionState.IDLE)
        return ClickResult(self._state, accepted=True, path=self._path)

    def path_cost(self) -> float:
        return self._pathfinder.path_cost(self._path) if self._path else 0.0

    def _transition(self, target: SelectionState) -> None:
        if target not in _TRANSITIONS[self._state]:
            raise RuntimeError(f"invalid selection transition {self._state.value} -> {target.value}")
        if target is not self._state:
            logger.debug("selection %s -> %s", self._state.value, target.value)
        self._state = target


__all__ = ["ClickResult", "SelectionController", "SelectionState"]

"""Rectangular hex grid exposing the search capability used by :func:`astar`."""

from __future__ import annotations

import logging
import math
from typing import Callable, Iterator

from ..errors import (
    ImpassableTerrainError,
    InvalidDimensionsError,
    InvalidNodeError,
    InvalidTerrainCostError,
)
from .conversions import offset_to_world
from .coords import Coord, HexCell, normalise_cost
from .heuristics import euclidean_distance
from .neighbors import neighbors_offset_bounded

logger = logging.getLogger(__name__)

TerrainLookup = Callable[[int, int], float | None]


class HexGrid:
    """Read-only hex map of ``width`` columns by ``length`` rows.

    Cells are addressed with offset coordinates ``(x, z)``. Travel costs are
    attributed to the destination cell; impassable cells are left out of the
    neighbour graph entirely.
    """

    def __init__(self, width: int, length: int, costs: dict[Coord, float | None]) -> None:
        if width <= 0 or length <= 0:
            raise InvalidDimensionsError(width, length)
        self._width = width
        self._length = length
        self._cells: dict[Coord, HexCell] = {}
        for z in range(length):
            for x in range(width):
                self._cells[(x, z)] = HexCell(x, z, costs.get((x, z)))

    @property
    def width(self) -> int:
        return self._width

    @property
    def length(self) -> int:
        return self._length

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def in_bounds(self, x: int, z: int) -> bool:
        return 0 <= x < self._width and 0 <= z < self._length

    def at(self, x: int, z: int) -> HexCell | None:
        """Return the cell at ``(x, z)`` or ``None`` when out of bounds."""

        return self._cells.get((x, z))

    def cells(self) -> Iterator[HexCell]:
        yield from self._cells.values()

    def is_passable(self, coord: Coord) -> bool:
        cell = self._cells.get(coord)
        return cell is not None and cell.passable

    def world_position(self, coord: Coord) -> tuple[float, float]:
        return offset_to_world(coord)

    def min_travel_cost(self) -> float | None:
        """Lowest travel cost on the map, or ``None`` if nothing is passable."""

        costs = [cell.travel_cost for cell in self._cells.values() if cell.travel_cost is not None]
        return min(costs) if costs else None

    # --------- Search capability -------------------------------------------

    def neighbors(self, coord: Coord) -> Iterator[Coord]:
        x, z = coord
        for candidate in neighbors_offset_bounded(x, z, self._width, self._length):
            if self._cells[candidate].passable:
                yield candidate

    def cost_into(self, coord: Coord) -> float:
        cell = self._cells.get(coord)
        if cell is None:
            raise InvalidNodeError(coord, "outside the grid")
        if cell.travel_cost is None:
            raise ImpassableTerrainError(coord)
        return cell.travel_cost

    def heuristic(self, coord: Coord, goal: Coord) -> float:
        return euclidean_distance(coord, goal)

    # --------- Coordinate-style helpers ------------------------------------

    def neighbors_of(self, x: int, z: int) -> list[Coord]:
        """Return the passable in-bounds neighbours of ``(x, z)`` in table order."""

        return list(self.neighbors((x, z)))

    def cost_of(self, x: int, z: int) -> float:
        return self.cost_into((x, z))

    def heuristic_to(self, origin: Coord, goal: Coord) -> float:
        return self.heuristic(origin, goal)

    def __repr__(self) -> str:
        return f"HexGrid(width={self._width}, length={self._length})"


def build_grid(width: int, length: int, terrain_lookup: TerrainLookup) -> HexGrid:
    """Build a :class:`HexGrid` by querying ``terrain_lookup`` for every cell.

    ``terrain_lookup(x, z)`` returns a non-negative travel cost, or
    :data:`~hex_pathing.hexpath.coords.IMPASSABLE` (``math.inf`` is accepted
    as well) for terrain that can never be entered.
    """

    if width <= 0 or length <= 0:
        raise InvalidDimensionsError(width, length)

    costs: dict[Coord, float | None] = {}
    for z in range(length):
        for x in range(width):
            cost = normalise_cost(terrain_lookup(x, z))
            if cost is not None and (math.isnan(cost) or cost < 0):
                raise InvalidTerrainCostError(
                    f"travel cost at {(x, z)!r} must be non-negative, got {cost!r}"
                )
            costs[(x, z)] = cost

    grid = HexGrid(width, length, costs)
    logger.debug(
        "built %dx%d hex grid with %d impassable cells",
        width,
        length,
        sum(1 for cost in costs.values() if cost is None),
    )
    return grid

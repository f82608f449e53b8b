"""Hex Pathing package initialization."""

from .errors import (
    HexPathError,
    ImpassableTerrainError,
    InvalidDimensionsError,
    InvalidNodeError,
    InvalidTerrainCostError,
    SearchTimeoutError,
)
from .hexpath import IMPASSABLE, Coord, HexCell, HexGrid, Unreachable, build_grid
from .pathfinding import PathFinder, find_path, path_cost

__all__ = [
    "Coord",
    "HexCell",
    "HexGrid",
    "HexPathError",
    "IMPASSABLE",
    "ImpassableTerrainError",
    "InvalidDimensionsError",
    "InvalidNodeError",
    "InvalidTerrainCostError",
    "PathFinder",
    "SearchTimeoutError",
    "Unreachable",
    "build_grid",
    "find_path",
    "path_cost",
]

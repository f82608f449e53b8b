from .coords import Coord, HexCell, IMPASSABLE
from .conversions import offset_to_world
from .heuristics import euclidean_distance
from .neighbors import (
    EVEN_ROW_OFFSETS,
    ODD_ROW_OFFSETS,
    neighbors_offset,
    neighbors_offset_bounded,
    row_offsets,
)
from .frontier import Frontier
from .grid import HexGrid, TerrainLookup, build_grid
from .astar import SearchGraph, Unreachable, astar

__all__ = [
    "Coord",
    "HexCell",
    "IMPASSABLE",
    "offset_to_world",
    "euclidean_distance",
    "EVEN_ROW_OFFSETS",
    "ODD_ROW_OFFSETS",
    "neighbors_offset",
    "neighbors_offset_bounded",
    "row_offsets",
    "Frontier",
    "HexGrid",
    "TerrainLookup",
    "build_grid",
    "SearchGraph",
    "Unreachable",
    "astar",
]

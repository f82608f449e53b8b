from __future__ import annotations

from typing import Iterable

from .coords import Coord

# Flat-top rows where every even row sits half a tile to the left.
# Both tables run right, bottom-right, bottom-left, left, top-left, top-right.
EVEN_ROW_OFFSETS: tuple[Coord, ...] = (
    (+1, 0),
    (0, +1),
    (-1, +1),
    (-1, 0),
    (-1, -1),
    (0, -1),
)

ODD_ROW_OFFSETS: tuple[Coord, ...] = (
    (+1, 0),
    (+1, +1),
    (0, +1),
    (-1, 0),
    (0, -1),
    (+1, -1),
)


def row_offsets(z: int) -> tuple[Coord, ...]:
    return EVEN_ROW_OFFSETS if (z & 1) == 0 else ODD_ROW_OFFSETS


def neighbors_offset(x: int, z: int) -> Iterable[Coord]:
    for dx, dz in row_offsets(z):
        yield (x + dx, z + dz)


def neighbors_offset_bounded(x: int, z: int, width: int, length: int) -> Iterable[Coord]:
    for nx, nz in neighbors_offset(x, z):
        if 0 <= nx < width and 0 <= nz < length:
            yield (nx, nz)

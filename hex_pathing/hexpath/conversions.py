from __future__ import annotations

from .coords import Coord

# Rows overlap by a quarter tile, so successive rows are 0.75 apart.
ROW_SPACING = 0.75
EVEN_ROW_SHIFT = -0.5


def offset_to_world(coord: Coord) -> tuple[float, float]:
    """Return the ``(x, z)`` world-space centre of the tile at ``coord``."""

    x, z = coord
    shift = EVEN_ROW_SHIFT if (z & 1) == 0 else 0.0
    return x + shift, z * ROW_SPACING

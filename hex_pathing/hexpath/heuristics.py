from __future__ import annotations

import math

from .conversions import offset_to_world
from .coords import Coord


def euclidean_distance(a: Coord, b: Coord) -> float:
    ax, az = offset_to_world(a)
    bx, bz = offset_to_world(b)
    return math.hypot(ax - bx, az - bz)

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final, Tuple

Coord = Tuple[int, int]  # offset (x, z); z is the row

# Marker a terrain lookup returns for tiles that can never be entered.
IMPASSABLE: Final = None


@dataclass(frozen=True, slots=True)
class HexCell:
    x: int
    z: int
    travel_cost: float | None

    @property
    def coord(self) -> Coord:
        return (self.x, self.z)

    @property
    def passable(self) -> bool:
        return self.travel_cost is not None


def normalise_cost(cost: float | None) -> float | None:
    """Map a raw terrain cost onto either a finite float or :data:`IMPASSABLE`."""

    if cost is IMPASSABLE:
        return IMPASSABLE
    value = float(cost)
    if math.isinf(value) and value > 0:
        return IMPASSABLE
    return value

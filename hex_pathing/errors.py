"""Error taxonomy for grid construction and path searches."""

from __future__ import annotations


class HexPathError(Exception):
    """Base class for every error raised by :mod:`hex_pathing`."""


class InvalidDimensionsError(HexPathError, ValueError):
    """Raised when a grid is requested with a non-positive width or length."""

    def __init__(self, width: int, length: int) -> None:
        super().__init__(f"grid dimensions must be positive, got {width}x{length}")
        self.width = width
        self.length = length


class InvalidTerrainCostError(HexPathError, ValueError):
    """Raised when a terrain lookup yields a negative or NaN travel cost."""


class InvalidNodeError(HexPathError, LookupError):
    """Raised when a search endpoint is outside the graph or cannot be entered."""

    def __init__(self, node: object, reason: str) -> None:
        super().__init__(f"{node!r} is not a valid search node: {reason}")
        self.node = node
        self.reason = reason


class ImpassableTerrainError(HexPathError, ValueError):
    """Raised when the travel cost of impassable terrain is requested."""

    def __init__(self, node: object) -> None:
        super().__init__(f"{node!r} is impassable and has no travel cost")
        self.node = node


class SearchTimeoutError(HexPathError, TimeoutError):
    """Raised when a search is stopped before it reached a result."""


__all__ = [
    "HexPathError",
    "ImpassableTerrainError",
    "InvalidDimensionsError",
    "InvalidNodeError",
    "InvalidTerrainCostError",
    "SearchTimeoutError",
]

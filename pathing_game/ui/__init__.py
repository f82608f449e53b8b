"""Text rendering helpers for maps and paths."""

from .hex_map import render_hex_map

__all__ = ["render_hex_map"]

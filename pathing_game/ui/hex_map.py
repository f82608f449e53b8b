"""Hex map rendering utilities for the text UI."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from rich.console import RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from hex_pathing import Coord

from ..world.config import TerrainType
from ..world.map import GameMap

PATH_STYLE = "bold yellow"
ENDPOINT_STYLE = "bold cyan"
IMPASSABLE_STYLE = "red"


def _cell_markup(symbol: str, style: str | None) -> str:
    text = escape(symbol)
    return f"[{style}]{text}[/]" if style else text


def _symbol_for(game_map: GameMap, terrain: TerrainType) -> str:
    settings = game_map.table.get(terrain)
    if settings is None:
        return terrain.value[:2].title()
    return settings.symbol.ljust(2)


def render_hex_map(
    game_map: GameMap,
    *,
    path: Iterable[Coord] = (),
    endpoints: Iterable[Coord] = (),
    title: str = "Hex Map",
    highlight_map: Mapping[Coord, str] | None = None,
) -> RenderableType:
    """Render ``game_map`` as offset rows, highlighting ``path`` and ``endpoints``.

    Even rows sit half a tile to the left of odd rows, so odd rows get a
    one-character indent.
    """

    path_cells = set(path)
    endpoint_cells = set(endpoints)
    overrides = dict(highlight_map or {})

    lines: list[str] = []
    for z in range(game_map.length):
        prefix = " " if z % 2 else ""
        cell_text: list[str] = []
        for x in range(game_map.width):
            coord = (x, z)
            if coord in overrides:
                cell_text.append(overrides[coord])
                continue
            terrain = game_map.terrain[coord]
            symbol = _symbol_for(game_map, terrain)
            if coord in endpoint_cells:
                style: str | None = ENDPOINT_STYLE
            elif coord in path_cells:
                style = PATH_STYLE
            elif not game_map.is_passable(coord):
                style = IMPASSABLE_STYLE
            else:
                style = None
            cell_text.append(_cell_markup(symbol, style))
        lines.append(prefix + " ".join(cell_text))

    map_text = Text.from_markup("\n".join(lines))
    return Panel(map_text, title=title, border_style="cyan")


def describe_path(path: Iterable[Coord]) -> str:
    return " -> ".join(f"({x},{z})" for x, z in path)


__all__ = ["describe_path", "render_hex_map"]

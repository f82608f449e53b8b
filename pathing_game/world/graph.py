"""Explicit movement graphs built from a :class:`~hex_pathing.HexGrid`.

The search core never materialises edges; these helpers do, so paths found by
A* can be checked against networkx's Dijkstra implementation.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Sequence, TypeAlias

import networkx as nx

from hex_pathing import Coord, HexGrid

if TYPE_CHECKING:  # pragma: no cover - typing only
    MovementGraph: TypeAlias = nx.DiGraph[Coord]
else:  # pragma: no cover - runtime alias without subscripting
    MovementGraph: TypeAlias = nx.DiGraph


def build_movement_graph(grid: HexGrid) -> MovementGraph:
    """Return a directed graph whose edge weights are destination travel costs."""

    graph: MovementGraph = nx.DiGraph(width=grid.width, length=grid.length)
    for cell in grid.cells():
        if not cell.passable:
            continue
        graph.add_node(cell.coord, pos=grid.world_position(cell.coord), cost=cell.travel_cost)

    for node in list(graph.nodes):
        for neighbor in grid.neighbors(node):
            graph.add_edge(node, neighbor, weight=grid.cost_into(neighbor))
    return graph


def reference_path_cost(graph: MovementGraph, start: Coord, goal: Coord) -> float:
    """Return the Dijkstra cost from ``start`` to ``goal``, ``math.inf`` if unreachable."""

    if start not in graph or goal not in graph:
        return math.inf
    try:
        return float(nx.dijkstra_path_length(graph, start, goal, weight="weight"))
    except nx.NetworkXNoPath:
        return math.inf


def reference_path(graph: MovementGraph, start: Coord, goal: Coord) -> list[Coord] | None:
    if start not in graph or goal not in graph:
        return None
    try:
        return list(nx.dijkstra_path(graph, start, goal, weight="weight"))
    except nx.NetworkXNoPath:
        return None


def is_valid_path(graph: MovementGraph, path: Sequence[Coord]) -> bool:
    """True when every consecutive pair of ``path`` is an edge of ``graph``."""

    if not path or path[0] not in graph:
        return False
    return all(graph.has_edge(a, b) for a, b in zip(path, path[1:]))


def path_travel_cost(graph: MovementGraph, path: Sequence[Coord]) -> float:
    """Return the total travel cost for ``path`` within ``graph``."""

    if len(path) < 2:
        return 0.0
    total = 0.0
    for origin, destination in zip(path, path[1:]):
        data: dict[str, Any] = graph.get_edge_data(origin, destination) or {}
        total += float(data.get("weight", math.inf))
    return total


def reachable_from(graph: MovementGraph, start: Coord) -> set[Coord]:
    if start not in graph:
        return set()
    return set(nx.descendants(graph, start)) | {start}


__all__ = [
    "MovementGraph",
    "build_movement_graph",
    "is_valid_path",
    "path_travel_cost",
    "reachable_from",
    "reference_path",
    "reference_path_cost",
]

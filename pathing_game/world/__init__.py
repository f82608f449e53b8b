"""World domain models: terrain, configuration and map generation."""

from .config import (
    GameConfig,
    MapGenerator,
    MapSettings,
    RandomnessSettings,
    TerrainSettings,
    TerrainType,
    default_terrain_table,
)
from .graph import (
    build_movement_graph,
    is_valid_path,
    path_travel_cost,
    reachable_from,
    reference_path,
    reference_path_cost,
)
from .map import GameMap, generate_map
from .rng import MapRandomness

__all__ = [
    "build_movement_graph",
    "default_terrain_table",
    "GameConfig",
    "GameMap",
    "generate_map",
    "is_valid_path",
    "MapGenerator",
    "MapRandomness",
    "MapSettings",
    "path_travel_cost",
    "RandomnessSettings",
    "reachable_from",
    "reference_path",
    "reference_path_cost",
    "TerrainSettings",
    "TerrainType",
]

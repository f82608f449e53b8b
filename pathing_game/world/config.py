"""Validated configuration models for terrain, map generation and randomness."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .rng import MapRandomness


class TerrainType(str, Enum):
    """Terrain classifications a tile can carry."""

    GRASS = "grass"
    FOREST = "forest"
    DESERT = "desert"
    MOUNTAIN = "mountain"
    WATER = "water"


class MapGenerator(str, Enum):
    """Strategies for assigning terrain to tiles."""

    UNIFORM = "uniform"
    NOISE = "noise"


class TerrainSettings(BaseModel):
    """Travel properties and display symbol of one terrain type."""

    model_config = ConfigDict(extra="forbid")

    travel_cost: float = Field(default=1.0, ge=0.0, allow_inf_nan=False)
    passable: bool = Field(default=True)
    symbol: str = Field(default="??", min_length=1, max_length=2)
    weight: float = Field(default=1.0, ge=0.0)

    @property
    def cost(self) -> float | None:
        """Travel cost, or ``None`` when the terrain can never be entered."""

        return self.travel_cost if self.passable else None


def default_terrain_table() -> dict[TerrainType, TerrainSettings]:
    return {
        TerrainType.GRASS: TerrainSettings(travel_cost=1.0, symbol="Gr"),
        TerrainType.FOREST: TerrainSettings(travel_cost=2.0, symbol="Fo"),
        TerrainType.DESERT: TerrainSettings(travel_cost=5.0, symbol="De"),
        TerrainType.MOUNTAIN: TerrainSettings(travel_cost=10.0, symbol="Mt"),
        TerrainType.WATER: TerrainSettings(travel_cost=0.0, passable=False, symbol="~~"),
    }


class MapSettings(BaseModel):
    """Dimensions and generation strategy of a map."""

    model_config = ConfigDict(extra="forbid")

    width: int = Field(default=8, ge=1)
    length: int = Field(default=8, ge=1)
    generator: MapGenerator = Field(default=MapGenerator.UNIFORM)
    noise_frequency: float = Field(default=0.25, gt=0.0)


class RandomnessSettings(BaseModel):
    """Configuration for deterministic RNG streams."""

    model_config = ConfigDict(extra="forbid")

    seed: int = Field(default=0, ge=0)

    def factory(self) -> MapRandomness:
        """Instantiate a :class:`~pathing_game.world.rng.MapRandomness` helper."""

        from .rng import MapRandomness

        return MapRandomness(seed=self.seed)


class GameConfig(BaseModel):
    """Top-level configuration payload describing a game session."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="Hex Pathing")
    map: MapSettings = Field(default_factory=MapSettings)
    randomness: RandomnessSettings = Field(default_factory=RandomnessSettings)
    terrain: dict[TerrainType, TerrainSettings] = Field(default_factory=default_terrain_table)

    @field_validator("terrain", mode="before")
    @classmethod
    def _merge_terrain_defaults(cls, value: object) -> dict[Any, Any]:
        if value is None:
            return default_terrain_table()
        if not isinstance(value, dict):
            raise ValueError("terrain must be a mapping of terrain type to settings")
        merged: dict[Any, Any] = dict(default_terrain_table())
        for key, settings in value.items():
            merged[TerrainType(key)] = settings
        return merged

    @field_validator("terrain")
    @classmethod
    def _require_passable_terrain(
        cls, value: dict[TerrainType, TerrainSettings]
    ) -> dict[TerrainType, TerrainSettings]:
        if not any(settings.passable for settings in value.values()):
            raise ValueError("at least one terrain type must be passable")
        if sum(settings.weight for settings in value.values()) <= 0:
            raise ValueError("terrain weights must not all be zero")
        return value

    @property
    def seed(self) -> int:
        return self.randomness.seed

    def randomness_factory(self) -> MapRandomness:
        """Return a new :class:`~pathing_game.world.rng.MapRandomness` instance."""

        return self.randomness.factory()

    def normalised_weights(self) -> dict[TerrainType, float]:
        """Return terrain generation weights normalised to sum to one."""

        total = sum(settings.weight for settings in self.terrain.values())
        return {terrain: settings.weight / total for terrain, settings in self.terrain.items()}

    @classmethod
    def load(cls, path: Path) -> GameConfig:
        """Read and validate a JSON configuration file."""

        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))


__all__ = [
    "GameConfig",
    "MapGenerator",
    "MapSettings",
    "RandomnessSettings",
    "TerrainSettings",
    "TerrainType",
    "default_terrain_table",
]

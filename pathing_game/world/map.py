"""Hex map terrain layout and seeded map generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Mapping, Sequence

from hex_pathing import Coord, HexGrid, build_grid

from .config import GameConfig, MapGenerator, TerrainSettings, TerrainType, default_terrain_table
from .rng import MapRandomness

logger = logging.getLogger(__name__)


@dataclass
class GameMap:
    """Terrain assignment for every tile of a ``width`` by ``length`` map."""

    width: int
    length: int
    terrain: dict[Coord, TerrainType]
    table: Mapping[TerrainType, TerrainSettings] = field(default_factory=default_terrain_table)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.length <= 0:
            raise ValueError("map dimensions must be positive")
        missing = [
            (x, z)
            for z in range(self.length)
            for x in range(self.width)
            if (x, z) not in self.terrain
        ]
        if missing:
            raise ValueError(f"terrain missing for {len(missing)} tiles, first {missing[0]!r}")

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[TerrainType | str]],
        table: Mapping[TerrainType, TerrainSettings] | None = None,
    ) -> GameMap:
        """Build a map from rows of terrain names; ``rows[z][x]`` is tile ``(x, z)``."""

        if not rows or not rows[0]:
            raise ValueError("rows must describe at least one tile")
        width = len(rows[0])
        terrain: dict[Coord, TerrainType] = {}
        for z, row in enumerate(rows):
            if len(row) != width:
                raise ValueError("all rows must have the same width")
            for x, name in enumerate(row):
                terrain[(x, z)] = TerrainType(name)
        return cls(
            width=width,
            length=len(rows),
            terrain=terrain,
            table=dict(table) if table is not None else default_terrain_table(),
        )

    def in_bounds(self, coord: Coord) -> bool:
        x, z = coord
        return 0 <= x < self.width and 0 <= z < self.length

    def terrain_at(self, x: int, z: int) -> TerrainType | None:
        return self.terrain.get((x, z))

    def settings_at(self, x: int, z: int) -> TerrainSettings | None:
        terrain = self.terrain_at(x, z)
        return None if terrain is None else self.table[terrain]

    def is_passable(self, coord: Coord) -> bool:
        settings = self.settings_at(*coord)
        return settings is not None and settings.passable

    def terrain_lookup(self, x: int, z: int) -> float | None:
        """Travel cost of ``(x, z)`` in the form :func:`build_grid` expects."""

        return self.table[self.terrain[(x, z)]].cost

    def build_grid(self) -> HexGrid:
        return build_grid(self.width, self.length, self.terrain_lookup)

    def tiles(self) -> Iterator[tuple[Coord, TerrainType]]:
        for z in range(self.length):
            for x in range(self.width):
                yield (x, z), self.terrain[(x, z)]


def generate_map(config: GameConfig, randomness: MapRandomness | None = None) -> GameMap:
    """Assign terrain to every tile according to ``config.map.generator``."""

    settings = config.map
    if randomness is None:
        randomness = config.randomness_factory()

    if settings.generator is MapGenerator.NOISE:
        terrain = _noise_terrain(config, randomness)
    else:
        terrain = _uniform_terrain(config, randomness)

    game_map = GameMap(
        width=settings.width,
        length=settings.length,
        terrain=terrain,
        table=dict(config.terrain),
    )
    logger.info(
        "generated %dx%d %s map (seed %d)",
        settings.width,
        settings.length,
        settings.generator.value,
        config.seed,
    )
    return game_map


def _uniform_terrain(config: GameConfig, randomness: MapRandomness) -> dict[Coord, TerrainType]:
    weights = config.normalised_weights()
    choices = list(weights)
    probabilities = [weights[terrain] for terrain in choices]
    rng = randomness.tile_generator()
    settings = config.map

    picks = rng.choice(len(choices), size=(settings.width, settings.length), p=probabilities)
    return {
        (x, z): choices[int(picks[x, z])]
        for x in range(settings.width)
        for z in range(settings.length)
    }


def _noise_terrain(config: GameConfig, randomness: MapRandomness) -> dict[Coord, TerrainType]:
    # Cheap terrain occupies the low end of the noise range, so samples in
    # [0, 1) are split into bands sized by the normalised weights.
    weights = config.normalised_weights()
    ordered = sorted(
        (terrain for terrain in weights if weights[terrain] > 0),
        key=lambda terrain: _band_order(config.terrain[terrain]),
    )
    bands: list[tuple[float, TerrainType]] = []
    upper = 0.0
    for terrain in ordered:
        upper += weights[terrain]
        bands.append((upper, terrain))

    noise = randomness.terrain_noise()
    frequency = config.map.noise_frequency
    terrain_map: dict[Coord, TerrainType] = {}
    for x in range(config.map.width):
        for z in range(config.map.length):
            sample = randomness.sample(noise, x, z, frequency)
            terrain_map[(x, z)] = _pick_band(bands, sample)
    return terrain_map


def _band_order(settings: TerrainSettings) -> tuple[int, float]:
    # Impassable terrain (water) forms the lowest band, below the cheapest land.
    return (0 if not settings.passable else 1, settings.travel_cost)


def _pick_band(bands: list[tuple[float, TerrainType]], sample: float) -> TerrainType:
    for upper, terrain in bands:
        if sample < upper:
            return terrain
    return bands[-1][1]


__all__ = ["GameMap", "generate_map"]

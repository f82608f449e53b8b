import pytest

from hex_pathing import ImpassableTerrainError
from pathing_game.world.config import GameConfig, MapGenerator, TerrainType
from pathing_game.world.map import GameMap, generate_map


def _config(**map_settings):
    return GameConfig.model_validate({"map": map_settings, "randomness": {"seed": 11}})


@pytest.mark.parametrize("generator", list(MapGenerator))
def test_generate_map_fills_every_tile(generator):
    game_map = generate_map(_config(width=7, length=5, generator=generator.value))
    assert (game_map.width, game_map.length) == (7, 5)
    assert len(game_map.terrain) == 35
    assert all(isinstance(terrain, TerrainType) for _, terrain in game_map.tiles())


@pytest.mark.parametrize("generator", list(MapGenerator))
def test_generate_map_is_deterministic_per_seed(generator):
    config = _config(width=6, length=6, generator=generator.value)
    assert generate_map(config).terrain == generate_map(config).terrain


@pytest.mark.parametrize("generator", list(MapGenerator))
def test_reusing_randomness_regenerates_the_same_map(generator):
    config = _config(width=5, length=4, generator=generator.value)
    randomness = config.randomness_factory()
    assert generate_map(config, randomness).terrain == generate_map(config, randomness).terrain


def test_zero_weight_terrain_is_never_generated():
    config = GameConfig.model_validate(
        {
            "map": {"width": 8, "length": 8},
            "terrain": {"water": {"passable": False, "travel_cost": 0.0, "weight": 0.0}},
        }
    )
    for generator in MapGenerator:
        data = config.model_dump()
        data["map"]["generator"] = generator.value
        game_map = generate_map(GameConfig.model_validate(data))
        assert TerrainType.WATER not in set(game_map.terrain.values())


def test_from_rows_and_grid_costs():
    game_map = GameMap.from_rows(
        [
            ["grass", "forest", "water"],
            ["desert", "mountain", "grass"],
        ]
    )
    assert game_map.terrain_at(1, 0) is TerrainType.FOREST
    assert game_map.terrain_at(0, 1) is TerrainType.DESERT
    assert game_map.terrain_at(5, 5) is None
    assert not game_map.is_passable((2, 0))

    grid = game_map.build_grid()
    assert grid.cost_of(0, 0) == 1.0
    assert grid.cost_of(1, 0) == 2.0
    assert grid.cost_of(0, 1) == 5.0
    assert grid.cost_of(1, 1) == 10.0
    with pytest.raises(ImpassableTerrainError):
        grid.cost_of(2, 0)


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(ValueError):
        GameMap.from_rows([["grass", "grass"], ["grass"]])


def test_game_map_requires_every_tile():
    with pytest.raises(ValueError):
        GameMap(width=2, length=1, terrain={(0, 0): TerrainType.GRASS})

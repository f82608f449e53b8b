import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from hex_pathing import IMPASSABLE, PathFinder, Unreachable, build_grid, find_path, path_cost
from pathing_game.world.graph import build_movement_graph, reference_path_cost

COST_CHOICES = (1.0, 2.0, 5.0, 10.0, IMPASSABLE)


def _random_grid(seed: int, width: int = 6, length: int = 6):
    rng = np.random.default_rng(seed)
    picks = rng.integers(0, len(COST_CHOICES), size=(width, length))
    return build_grid(width, length, lambda x, z: COST_CHOICES[int(picks[x, z])])


def _passable_coords(grid):
    return [cell.coord for cell in grid.cells() if cell.passable]


@pytest.mark.parametrize("seed", range(8))
def test_paths_match_dijkstra_reference(seed):
    grid = _random_grid(seed)
    reference = build_movement_graph(grid)
    coords = _passable_coords(grid)
    pf = PathFinder(grid)

    for start in coords[::3]:
        for goal in coords[::2]:
            expected = reference_path_cost(reference, start, goal)
            result = pf.find_path(start, goal)
            if math.isinf(expected):
                assert isinstance(result, Unreachable)
                continue
            assert result[0] == start and result[-1] == goal
            assert pf.path_cost(result) == pytest.approx(expected)


@pytest.mark.parametrize("seed", range(4))
def test_consecutive_path_cells_are_neighbors(seed):
    grid = _random_grid(seed + 100)
    coords = _passable_coords(grid)
    for goal in coords:
        result = find_path(grid, coords[0], goal)
        if isinstance(result, Unreachable):
            continue
        for a, b in zip(result, result[1:]):
            assert b in grid.neighbors_of(*a)
            assert a in grid.neighbors_of(*b)


def test_find_path_single_cell_and_cost():
    grid = build_grid(4, 4, lambda x, z: 3.0)
    assert find_path(grid, (2, 2), (2, 2)) == [(2, 2)]
    assert path_cost(grid, [(2, 2)]) == 0.0
    assert path_cost(grid, [(0, 0), (1, 0), (2, 0)]) == 6.0


def test_pathfinder_caches_results_until_invalidated():
    grid = build_grid(5, 5, lambda x, z: 1.0)
    pf = PathFinder(grid)

    first = pf.find_path((0, 0), (4, 4))
    cached = pf._cache[((0, 0), (4, 4))]
    assert pf.find_path((0, 0), (4, 4)) == first
    assert pf._cache[((0, 0), (4, 4))] is cached

    pf.invalidate()
    assert not pf._cache
    assert pf.find_path((0, 0), (4, 4)) == first


def test_pathfinder_returns_independent_copies_of_cached_paths():
    grid = build_grid(5, 5, lambda x, z: 1.0)
    pf = PathFinder(grid)

    first = pf.find_path((0, 0), (4, 4))
    expected = list(first)
    first.append((9, 9))
    first[0] = (3, 3)

    second = pf.find_path((0, 0), (4, 4))
    assert second == expected
    assert second is not first


def test_pathfinder_caches_unreachable_results():
    grid = build_grid(3, 1, lambda x, z: IMPASSABLE if x == 1 else 1.0)
    pf = PathFinder(grid)
    result = pf.find_path((0, 0), (2, 0))
    assert isinstance(result, Unreachable)
    assert pf.find_path((0, 0), (2, 0)) is result


def test_pathfinder_rejects_non_positive_time_limit():
    grid = build_grid(2, 2, lambda x, z: 1.0)
    with pytest.raises(ValueError):
        PathFinder(grid, time_limit=0)


def test_generous_time_limit_does_not_change_result():
    grid = _random_grid(7)
    coords = _passable_coords(grid)
    limited = PathFinder(grid, time_limit=60.0)
    for goal in coords:
        assert limited.find_path(coords[0], goal) == find_path(grid, coords[0], goal)


def test_concurrent_searches_share_a_grid():
    grid = _random_grid(3, width=10, length=10)
    coords = _passable_coords(grid)
    pairs = [(coords[i], coords[-1 - i]) for i in range(min(20, len(coords)))]
    expected = [find_path(grid, start, goal) for start, goal in pairs]

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda pair: find_path(grid, *pair), pairs))

    assert results == expected


def test_unreachable_result_is_logged(caplog):
    grid = build_grid(3, 1, lambda x, z: IMPASSABLE if x == 1 else 1.0)
    with caplog.at_level("INFO", logger="hex_pathing.pathfinding"):
        find_path(grid, (0, 0), (2, 0))
    assert "no path from (0, 0) to (2, 0)" in caplog.text

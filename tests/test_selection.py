import logging

import pytest

from hex_pathing import SearchTimeoutError
from pathing_game.selection import SelectionController, SelectionState
from pathing_game.world.map import GameMap

ROWS = [
    ["grass", "grass", "grass", "grass"],
    ["grass", "water", "forest", "grass"],
    ["grass", "grass", "grass", "grass"],
]

ISLAND_ROWS = [
    ["grass", "water", "grass"],
    ["water", "water", "water"],
]


def test_starts_awaiting_start():
    controller = SelectionController(GameMap.from_rows(ROWS))
    assert controller.state is SelectionState.AWAITING_START
    assert controller.start is None
    assert controller.goal is None
    assert controller.path == ()


def test_two_clicks_produce_a_path():
    controller = SelectionController(GameMap.from_rows(ROWS))

    first = controller.click((0, 0))
    assert first.accepted
    assert controller.state is SelectionState.AWAITING_GOAL
    assert controller.start == (0, 0)

    second = controller.click((3, 2))
    assert second.state is SelectionState.IDLE
    assert second.path[0] == (0, 0)
    assert second.path[-1] == (3, 2)
    assert controller.path == second.path
    assert controller.goal == (3, 2)
    assert (1, 1) not in controller.path
    assert controller.path_cost() == len(controller.path) - 1


def test_clicking_water_is_ignored(caplog):
    controller = SelectionController(GameMap.from_rows(ROWS))
    with caplog.at_level(logging.WARNING, logger="pathing_game.selection"):
        result = controller.click((1, 1))
    assert not result.accepted
    assert controller.state is SelectionState.AWAITING_START
    assert "cannot move to water tile" in caplog.text


def test_clicking_outside_the_map_is_ignored():
    controller = SelectionController(GameMap.from_rows(ROWS))
    controller.click((0, 0))
    result = controller.click((9, 9))
    assert not result.accepted
    assert controller.state is SelectionState.AWAITING_GOAL


def test_unreachable_goal_resets_selection(caplog):
    controller = SelectionController(GameMap.from_rows(ISLAND_ROWS))
    controller.click((0, 0))
    with caplog.at_level(logging.WARNING, logger="pathing_game.selection"):
        result = controller.click((2, 0))
    assert result.unreachable
    assert result.path == ()
    assert controller.state is SelectionState.AWAITING_START
    assert controller.start is None
    assert "unreachable" in caplog.text


def test_same_tile_twice_gives_single_cell_path():
    controller = SelectionController(GameMap.from_rows(ROWS))
    controller.click((2, 0))
    result = controller.click((2, 0))
    assert result.path == ((2, 0),)
    assert controller.path_cost() == 0.0


def test_click_after_result_starts_new_selection():
    controller = SelectionController(GameMap.from_rows(ROWS))
    controller.click((0, 0))
    controller.click((3, 0))
    assert controller.state is SelectionState.IDLE

    controller.click((0, 2))
    assert controller.state is SelectionState.AWAITING_GOAL
    assert controller.start == (0, 2)
    assert controller.goal is None
    assert controller.path == ()


def test_reset_clears_everything():
    controller = SelectionController(GameMap.from_rows(ROWS))
    controller.click((0, 0))
    controller.click((3, 2))
    controller.reset()
    assert controller.state is SelectionState.AWAITING_START
    assert controller.path == ()
    assert controller.start is None


def test_load_map_replaces_grid_and_resets():
    controller = SelectionController(GameMap.from_rows(ROWS))
    controller.click((0, 0))
    island = GameMap.from_rows(ISLAND_ROWS)
    controller.load_map(island)
    assert controller.game_map is island
    assert controller.state is SelectionState.AWAITING_START
    assert not controller.click((1, 1)).accepted


def test_timed_out_goal_keeps_start_and_no_goal(monkeypatch):
    monkeypatch.setattr("hex_pathing.pathfinding._deadline", lambda time_limit: lambda: True)
    controller = SelectionController(GameMap.from_rows(ROWS), time_limit=1.0)
    controller.click((0, 0))

    with pytest.raises(SearchTimeoutError):
        controller.click((3, 2))

    assert controller.state is SelectionState.AWAITING_GOAL
    assert controller.start == (0, 0)
    assert controller.goal is None
    assert controller.path == ()

    monkeypatch.undo()
    controller.load_map(GameMap.from_rows(ROWS))
    controller.click((0, 0))
    assert controller.click((3, 2)).state is SelectionState.IDLE

"""Command line entry point: generate a map and find a path across it."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from hex_pathing import Coord, HexPathError, SearchTimeoutError

from .selection import SelectionController, SelectionState
from .setup_logging import setup_logging
from .ui.hex_map import describe_path, render_hex_map
from .world.config import GameConfig, MapGenerator
from .world.map import generate_map

EXIT_FOUND = 0
EXIT_UNREACHABLE = 1
EXIT_INVALID = 2
EXIT_TIMEOUT = 3


def parse_coord(value: str) -> Coord:
    parts = value.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Z but got {value!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected integer X,Z but got {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathing-game",
        description="Generate a hex map and find the cheapest path between two tiles.",
    )
    parser.add_argument("--config", type=Path, help="JSON game configuration file")
    parser.add_argument("--width", type=int, help="map width (overrides config)")
    parser.add_argument("--length", type=int, help="map length (overrides config)")
    parser.add_argument("--seed", type=int, help="random seed (overrides config)")
    parser.add_argument(
        "--generator",
        choices=[generator.value for generator in MapGenerator],
        help="terrain generator (overrides config)",
    )
    parser.add_argument("--start", type=parse_coord, default=None, help="start tile X,Z")
    parser.add_argument("--goal", type=parse_coord, default=None, help="goal tile X,Z")
    parser.add_argument("--time-limit", type=float, default=None, help="search time limit in seconds")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log more (repeatable)")
    parser.add_argument("--log-file", type=Path, default=None, help="also write log records to this file")
    return parser


def load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()
    data = config.model_dump()
    if args.width is not None:
        data["map"]["width"] = args.width
    if args.length is not None:
        data["map"]["length"] = args.length
    if args.generator is not None:
        data["map"]["generator"] = args.generator
    if args.seed is not None:
        data["randomness"]["seed"] = args.seed
    return GameConfig.model_validate(data)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one path request and print the map with the result."""

    args = build_parser().parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    setup_logging(level, args.log_file)

    console = Console()
    try:
        config = load_config(args)
    except (OSError, ValidationError) as exc:
        console.print(f"[red]invalid configuration:[/] {escape(str(exc))}")
        return EXIT_INVALID

    game_map = generate_map(config)
    start = args.start if args.start is not None else (0, 0)
    goal = args.goal if args.goal is not None else (game_map.width - 1, game_map.length - 1)

    try:
        controller = SelectionController(game_map, time_limit=args.time_limit)
    except ValueError as exc:
        console.print(f"[red]invalid option:[/] {escape(str(exc))}")
        return EXIT_INVALID

    for coord in (start, goal):
        if not game_map.in_bounds(coord) or not game_map.is_passable(coord):
            console.print(render_hex_map(game_map, endpoints=[start, goal], title=config.name))
            console.print(f"[red]tile {coord} is outside the map or impassable[/]")
            return EXIT_INVALID

    try:
        controller.click(start)
        outcome = controller.click(goal)
    except SearchTimeoutError as exc:
        console.print(f"[red]search timed out:[/] {escape(str(exc))}")
        return EXIT_TIMEOUT
    except HexPathError as exc:
        console.print(f"[red]invalid search:[/] {escape(str(exc))}")
        return EXIT_INVALID

    if outcome.unreachable or controller.state is not SelectionState.IDLE:
        console.print(render_hex_map(game_map, endpoints=[start, goal], title=config.name))
        console.print(f"[yellow]no path from {start} to {goal}[/]")
        return EXIT_UNREACHABLE

    console.print(
        render_hex_map(game_map, path=outcome.path, endpoints=[start, goal], title=config.name)
    )
    console.print(f"path: {describe_path(outcome.path)}", highlight=False)
    console.print(f"cost: {controller.path_cost():g}")
    return EXIT_FOUND


if __name__ == "__main__":  # pragma: no cover - module entry point
    raise SystemExit(main())

"""Logging configuration for the command line entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s"


def setup_logging(level: int = logging.WARNING, log_file: Path | None = None) -> None:
    """
    Configure the root logger for the application.

    Messages go to stderr and, when ``log_file`` is given, to that file as
    well. Our own packages log at ``level``; everything else is held at
    WARNING so third-party chatter stays out of the way.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    logging.basicConfig(
        level=logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,  # drop handlers from earlier calls so lines are not duplicated
    )

    logging.getLogger("hex_pathing").setLevel(level)
    logging.getLogger("pathing_game").setLevel(level)


__all__ = ["LOG_FORMAT", "setup_logging"]

"""
Logging setup for the command-line front ends.

Library modules only create `logging.getLogger(__name__)` loggers; handlers
are attached here, once, by whichever app is running.
"""

from __future__ import annotations

import logging
from pathlib import Path

FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(level: str | int = "WARNING", log_file: Path | str | None = None) -> logging.Logger:
    """
    Configure the `wordgame` logger: console at `level`, plus an optional
    file handler that records everything from INFO up.
    """
    logger = logging.getLogger("wordgame")
    logger.setLevel(logging.DEBUG)

    # Prevent duplicate handlers when called twice (tests, restarts)
    if logger.handlers:
        logger.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(level.upper() if isinstance(level, str) else level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        p = Path(log_file)
        p.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(p, encoding="utf-8")
        fh.setLevel(logging.INFO)
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(fh)

    return logger

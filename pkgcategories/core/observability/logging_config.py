"""
Logging setup shared by the ``pkgcategories`` and ``categories`` entrypoints.

Level precedence: CLI flag > PKGCAT_LOG_LEVEL > WARNING.  PKGCAT_LOG_FILE
adds a file handler (its own level via PKGCAT_LOG_FILE_LEVEL).  Console
logs go to stderr so stdout carries only command output.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LOG_LEVEL = "PKGCAT_LOG_LEVEL"
ENV_LOG_FILE = "PKGCAT_LOG_FILE"
ENV_LOG_FILE_LEVEL = "PKGCAT_LOG_FILE_LEVEL"

# Detail grows as the level drops
_DETAILED = ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S")
_TIMESTAMPED = ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S")
_BARE = ("%(message)s", None)
_FILE_FORMAT = (_DETAILED[0], "%Y-%m-%d %H:%M:%S")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with a stderr (and optional file) handler.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ...).
        log_file: Optional path of a log file to append to.
        log_file_level: Level for the file; defaults to ``level``.
    """
    console_level = _parse_level(level)
    if console_level <= logging.DEBUG:
        fmt, datefmt = _DETAILED
    elif console_level <= logging.INFO:
        fmt, datefmt = _TIMESTAMPED
    else:
        fmt, datefmt = _BARE

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setLevel(file_level)
        handler.setFormatter(logging.Formatter(*_FILE_FORMAT))
        root.addHandler(handler)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)
    logging.raiseExceptions = False


def setup_logging_from_env(level: str | None = None) -> None:
    """``setup_logging`` with env var fallbacks; ``level`` wins when given."""
    setup_logging(
        level=level or os.environ.get(ENV_LOG_LEVEL, "WARNING"),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
    )


def _parse_level(level: str | None) -> int:
    """Level name → numeric level; unknown names mean WARNING."""
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING

"""Logging bootstrap for passviewer.

Everything goes to one rotating file: the terminal is in raw mode while the
viewer runs, so nothing may be written to stderr.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "passviewer"
LOG_LEVEL_ENV = "PASSVIEWER_LOG_LEVEL"
LOG_FILE_ENV = "PASSVIEWER_LOG_FILE"
LOG_FILENAME = "passviewer.log"


@dataclass(frozen=True)
class LoggingRuntime:
    """Resolved runtime logging configuration."""

    level_name: str
    level: int
    file_path: str


_RUNTIME: LoggingRuntime | None = None


def _parse_level(raw: str) -> tuple[str, int]:
    normalized = str(raw or "INFO").strip().upper()
    level = getattr(logging, normalized, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    return str(logging.getLevelName(level)), level


def _default_log_path() -> str:
    return str(Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME)


def _make_file_handler(level: int, file_path: str) -> logging.Handler:
    handler = RotatingFileHandler(
        file_path,
        maxBytes=2 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(threadName)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def configure() -> LoggingRuntime:
    """Configure the ``passviewer`` logger hierarchy with a rotating file handler.

    Idempotent: repeated calls return the originally configured runtime.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    level_name, level = _parse_level(os.environ.get(LOG_LEVEL_ENV, "INFO"))
    file_path = os.environ.get(LOG_FILE_ENV) or _default_log_path()

    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()
    try:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_make_file_handler(level, file_path))
    except OSError:
        logger.addHandler(logging.NullHandler())
        file_path = ""

    _RUNTIME = LoggingRuntime(level_name=level_name, level=level, file_path=file_path)
    return _RUNTIME


__all__ = ["LOG_FILE_ENV", "LOG_LEVEL_ENV", "LoggingRuntime", "configure"]

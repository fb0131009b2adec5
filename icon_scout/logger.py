# === FILE: icon_scout/logger.py ===
"""Logging setup for IconScout.

All modules log through one named logger::

    from icon_scout.logger import logger
    logger.info("Lookup started")

:func:`configure` is called once by the CLI. It owns only the handlers it
installed itself, so repeated calls do not stack output. aiohttp loggers are
set to the same level.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Iterable, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "IconScout"
LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# aiohttp loggers that follow the project level
AIOHTTP_LOGGERS: Final[tuple[str, ...]] = ("aiohttp.access", "aiohttp.client", "aiohttp.server")

_OWNED = "_icon_scout_handler"
_MAX_LOG_BYTES = 2 * 1024 * 1024

LevelT = Union[int, str]


def _own(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    setattr(handler, _OWNED, True)
    return handler


def _build_handlers(log_file: str | Path | None, fmt: str) -> Iterable[logging.Handler]:
    yield _own(logging.StreamHandler(sys.stdout), fmt)
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        yield _own(
            RotatingFileHandler(path, maxBytes=_MAX_LOG_BYTES, backupCount=2, encoding="utf-8"),
            fmt,
        )


def _drop_owned(lg: logging.Logger) -> None:
    for handler in [h for h in lg.handlers if getattr(h, _OWNED, False)]:
        lg.removeHandler(handler)
        handler.close()


def configure(
    level: LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Настраивает логгер IconScout: stdout и, при необходимости, файл с ротацией."""
    if isinstance(level, str):
        level = level.upper()
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    _drop_owned(lg)
    for handler in _build_handlers(log_file, log_format):
        lg.addHandler(handler)
    lg.propagate = False

    for name in AIOHTTP_LOGGERS:
        logging.getLogger(name).setLevel(level)
    return lg


logger: logging.Logger = configure()

__all__ = ["logger", "configure", "DEFAULT_FORMAT", "LOGGER_NAME", "LOG_LEVELS"]

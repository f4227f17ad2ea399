"""Logging setup: local timestamps and per-target level filtering."""

from __future__ import annotations

import logging
import os
import sys
import time
from collections.abc import Iterable

TRACE = 5
ENV_VAR = "AUDIOKIT_LOG"
DEFAULT_LEVEL = logging.DEBUG

_DEFAULT_TARGETS = ("py.warnings", "panic")
_LEVELS_BY_NAME = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}
_LEVELS_BY_NUMBER = {
    "1": logging.ERROR,
    "2": logging.WARNING,
    "3": logging.INFO,
    "4": logging.DEBUG,
    "5": TRACE,
}
_FORMAT = "%(asctime)s %(levelname)5s %(name)s:%(lineno)d: %(message)s"


class LocalTimeFormatter(logging.Formatter):
    """Formatter that stamps records with the local time in brackets."""

    def formatTime(self, record, datefmt=None):
        stamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(record.created))
        return f"[{stamp}]"


def resolve_level(value):
    """Turn a level name or number (1-5) into a logging level; DEBUG if unknown."""
    if value is None:
        return DEFAULT_LEVEL
    text = str(value)
    level = _LEVELS_BY_NAME.get(text.lower())
    if level is None:
        level = _LEVELS_BY_NUMBER.get(text, DEFAULT_LEVEL)
    return level


class _TargetsFilter(logging.Filter):
    def __init__(self, targets: Iterable[str], level: int) -> None:
        super().__init__()
        self.targets = tuple(targets)
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno < self.level:
            return False
        return any(
            record.name == target or record.name.startswith(target + ".")
            for target in self.targets
        )


class _TargetsHandler(logging.StreamHandler):
    pass


def configure_logging(targets):
    """Install a stdout handler that passes only records from the given targets.

    The level comes from the AUDIOKIT_LOG environment variable (DEBUG by
    default). Raises RuntimeError if logging was already configured this way.
    """
    root = logging.getLogger()
    if any(isinstance(handler, _TargetsHandler) for handler in root.handlers):
        raise RuntimeError("logging has already been configured")
    logging.addLevelName(TRACE, "TRACE")
    level = resolve_level(os.environ.get(ENV_VAR))
    handler = _TargetsHandler(sys.stdout)
    handler.setFormatter(LocalTimeFormatter(_FORMAT))
    handler.addFilter(_TargetsFilter((*_DEFAULT_TARGETS, *targets), level))
    root.addHandler(handler)
    root.setLevel(min(root.level or TRACE, TRACE))
    return handler
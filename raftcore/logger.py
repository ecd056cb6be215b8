"""Logging helpers and the fatal-error exception used across the package."""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping, NoReturn, Union

LOGGER_NAME = "raftcore"

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]


class RaftPanic(RuntimeError):
    """Raised when an internal invariant of the Raft state is violated."""


def default_logger() -> logging.LoggerAdapter:
    """Return the package logger, tagged with the current test case if any.

    The case is the last ``:``-separated part of the current thread's name.
    """
    base = logging.getLogger(LOGGER_NAME)
    name = threading.current_thread().name
    extra: dict[str, Any] = {}
    if name:
        extra["case"] = name.split(":")[-1]
    return logging.LoggerAdapter(base, extra)


def _context_of(logger: LoggerLike) -> str:
    extra: Mapping[str, Any] | None = getattr(logger, "extra", None)
    if not extra:
        return ""
    return ", ".join(f"{key}: {value}" for key, value in extra.items())


def fatal(logger: LoggerLike, message: object) -> NoReturn:
    """Raise :class:`RaftPanic` with ``message`` and the logger's context."""
    context = _context_of(logger)
    text = str(message) if not context else f"{message}, {context}"
    raise RaftPanic(text)
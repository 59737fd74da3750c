"""Logging filtered by verbosity and by functional zone."""

from __future__ import annotations

import enum
import sys
from typing import TextIO

_MAX_MESSAGE_LENGTH = 1023


class LogVerbosity(enum.IntEnum):
    """Level of detail; a message is written when its level is at or below the current one."""

    FATAL = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    VERBOSE = 4
    VERY_VERBOSE = 5


DEFAULT_LOG_VERBOSITY = LogVerbosity.WARNING


class LogZone(enum.Enum):
    """Functional area a message belongs to; the value is its printed name."""

    DEFAULT = "Default"
    RENDER = "Render"
    API = "API"


class FatalError(RuntimeError):
    """Raised after a fatal message has been written."""


class _LogState:
    def __init__(self) -> None:
        self.verbosity = DEFAULT_LOG_VERBOSITY
        self.enabled_zones: set[LogZone] = set()
        self.file: TextIO | None = None

    @property
    def stream(self) -> TextIO:
        return self.file if self.file is not None else sys.stderr


_state = _LogState()


def set_log_verbosity(verbosity: LogVerbosity) -> None:
    """Set the most detailed level that is still written."""
    _state.verbosity = LogVerbosity(verbosity)


def set_log_file(path) -> None:
    """Send log output to a new file at ``path``; raises OSError if it cannot be opened."""
    if _state.file is not None:
        _state.file.close()
        _state.file = None
    _state.file = open(path, "w", encoding="utf-8")


def enable_zone(zone: LogZone) -> None:
    _state.enabled_zones.add(zone)


def disable_zone(zone: LogZone) -> None:
    _state.enabled_zones.discard(zone)


def is_zone_enabled(zone: LogZone) -> bool:
    return zone in _state.enabled_zones


def _format(message: str, args: tuple) -> str:
    text = message % args if args else message
    return text[:_MAX_MESSAGE_LENGTH]


def _emit(zone: LogZone, text: str, end: str) -> None:
    stream = _state.stream
    stream.write(f"[{zone.value}] {text}{end}")
    stream.flush()


def _passes_filter(zone: LogZone, verbosity: LogVerbosity) -> bool:
    return verbosity <= _state.verbosity and is_zone_enabled(zone)


def log(zone: LogZone, verbosity: LogVerbosity, message: str, *args) -> None:
    """Write a message without a trailing newline if it passes the filters."""
    if _passes_filter(zone, verbosity):
        _emit(zone, _format(message, args), "")


def log_line(zone: LogZone, verbosity: LogVerbosity, message: str, *args) -> None:
    """Write a message followed by a newline if it passes the filters."""
    if _passes_filter(zone, verbosity):
        _emit(zone, _format(message, args), "\n")


def log_and_fail(zone: LogZone, message: str, *args) -> None:
    """Write a message unconditionally, then raise FatalError."""
    text = _format(message, args)
    _emit(zone, text, "")
    raise FatalError(text)


def log_line_and_fail(zone: LogZone, message: str, *args) -> None:
    """Write a line unconditionally, then raise FatalError."""
    text = _format(message, args)
    _emit(zone, text, "\n")
    raise FatalError(text)


def check(condition, message: str, *args) -> None:
    """Fail fatally in the default zone unless ``condition`` holds."""
    if not condition:
        log_line_and_fail(LogZone.DEFAULT, message, *args)
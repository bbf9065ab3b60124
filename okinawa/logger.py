"""Coloured, timestamped log lines written to standard error."""

from __future__ import annotations

import sys
import time
from enum import Enum

RESET_COLOR = "\x1b[0m"


class LogLevel(Enum):
    """Severity of a log message."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


_COLORS = {
    LogLevel.INFO: "\x1b[32m",
    LogLevel.WARNING: "\x1b[33m",
    LogLevel.ERROR: "\x1b[31m",
}


def _timestamp() -> str:
    return time.strftime("%H:%M:%S", time.localtime())


def log(level: LogLevel, message: str) -> None:
    """Write one message at the given level to standard error."""
    if isinstance(level, LogLevel):
        label = level.value
        color = _COLORS[level]
    else:
        label = "UNKNOWN"
        color = RESET_COLOR
    print(f"{color}{_timestamp()} [{label}]: {message}{RESET_COLOR}", file=sys.stderr)


def info(message: str) -> None:
    """Log an informational message."""
    log(LogLevel.INFO, message)


def warning(message: str) -> None:
    """Log a warning."""
    log(LogLevel.WARNING, message)


def error(message: str) -> None:
    """Log an error."""
    log(LogLevel.ERROR, message)
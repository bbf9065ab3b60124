"""File helpers."""

from __future__ import annotations

from . import logger


def read_file(filename: str) -> str:
    """Return the whole content of ``filename``, or "" if it cannot be opened."""
    try:
        with open(filename, "rb") as handle:
            data = handle.read()
    except OSError:
        logger.error(f"Utils :: Failed to open file: {filename}")
        return ""
    return data.decode("utf-8", errors="replace")
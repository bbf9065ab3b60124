"""String helpers with C-locale semantics."""

from __future__ import annotations

WHITESPACE = " \t\n\r\f\v"

_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def trim(text: str) -> str:
    """Strip whitespace from both ends."""
    return text.strip(WHITESPACE)


def trim_right(text: str) -> str:
    """Strip whitespace from the right end."""
    return text.rstrip(WHITESPACE)


def trim_fixed_string(text: str, max_len: int) -> str:
    """Cut ``text`` to ``max_len`` characters, then strip trailing whitespace."""
    return text[:max_len].rstrip(WHITESPACE)


def to_upper(text: str) -> str:
    """Upper-case ASCII letters only."""
    return text.translate(_UPPER)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters only."""
    return text.translate(_LOWER)
"""Conversion of fixed-column substrings, using 1-based inclusive indexes."""

from __future__ import annotations

import re
from typing import Any

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class BadConversion(ValueError):
    """Raised when a substring range is invalid or cannot be converted."""


def _check_range(text: str, i: int, j: int) -> None:
    if i < 1 or i > j + 1 or j > len(text):
        raise BadConversion(f"invalid substring range {i}..{j} for length {len(text)}")


def _to_int(s: str) -> int:
    if not _INT_RE.fullmatch(s):
        raise BadConversion(f"not an integer: {s!r}")
    value = int(s)
    if not _INT_MIN <= value <= _INT_MAX:
        raise BadConversion(f"integer out of range: {s!r}")
    return value


def _to_float(s: str) -> float:
    if not _FLOAT_RE.fullmatch(s):
        raise BadConversion(f"not a number: {s!r}")
    return float(s)


def convert_substring(text: str, i: int, j: int, kind: Any = str) -> Any:
    """Convert ``text[i-1:j]`` after skipping leading whitespace.

    ``kind`` is ``int``, ``float``, ``str`` or the string ``"unsigned"``.
    Trailing whitespace is not accepted for numeric kinds.
    """
    _check_range(text, i, j)
    while i <= j and text[i - 1].isspace():
        i += 1
    piece = text[i - 1 : j]
    if kind is str:
        return piece
    if kind is int:
        return _to_int(piece)
    if kind is float:
        return _to_float(piece)
    if kind == "unsigned":
        value = _to_int(piece)
        if value < 0:
            raise BadConversion(f"negative value for unsigned: {piece!r}")
        return value
    raise BadConversion(f"unsupported kind: {kind!r}")


def substring_is_blank(text: str, i: int, j: int) -> bool:
    """Return True when ``text[i-1:j]`` holds only whitespace."""
    _check_range(text, i, j)
    return all(ch.isspace() for ch in text[i - 1 : j])
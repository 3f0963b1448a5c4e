"""Text-level metrics for the input panel: byte size, line count, locations."""

from __future__ import annotations

import re

_UNITS = ("bytes", "KB", "MB", "GB")
_LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


def encode_utf8(text: str) -> bytes:
    """Encode ``text`` as UTF-8, writing lone surrogates as U+FFFD.

    ``json.loads`` keeps unpaired ``\\ud800``-style escapes as lone
    surrogates, which the strict codec refuses to encode.
    """
    return _LONE_SURROGATE.sub("\ufffd", text).encode("utf-8")


def byte_size(text: str) -> int:
    """Return the UTF-8 encoded length of ``text``."""
    return len(encode_utf8(text))


def line_count(text: str) -> int:
    """Return the number of lines in ``text``; empty text is one line."""
    return text.count("\n") + 1


def format_bytes(size: int) -> str:
    """Format a byte count with base-1024 units.

    The value is rounded to two decimals and trailing zeros are dropped, so
    ``1536`` becomes ``"1.5 KB"`` and ``2048`` becomes ``"2 KB"``.  Sizes past
    the largest unit stay in GB.

    Args:
        size: Non-negative byte count.

    Returns:
        A string such as ``"0 bytes"``, ``"512 bytes"`` or ``"3.14 MB"``.
    """
    if size == 0:
        return "0 bytes"
    unit = 0
    while unit < len(_UNITS) - 1 and size >= 1024 ** (unit + 1):
        unit += 1
    value = round(size / 1024**unit, 2)
    return f"{value:.2f}".rstrip("0").rstrip(".") + f" {_UNITS[unit]}"


def locate(text: str, position: int) -> tuple[int, int]:
    """Return the 1-based ``(line, column)`` of a character offset in ``text``.

    Lines are counted by the newlines before ``position``; the column is the
    length of the last partial line plus one.
    """
    head = text[:position]
    line = head.count("\n") + 1
    column = len(head) - (head.rfind("\n") + 1) + 1
    return line, column

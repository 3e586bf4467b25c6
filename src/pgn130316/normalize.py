"""Normalization helpers.

Centralizes defensive parsing of decoded message fields and the string form
used when comparing source codes.
"""

from __future__ import annotations

import math
from typing import Any


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text if text else None


def source_key(value: Any) -> str:
    """Return the string form of a source code or selector.

    The decoder hands over codes 0-14 as names and anything else as a number,
    while configuration may hold either a number or a numeric string.  All of
    ``7``, ``7.0`` and ``"7"`` normalize to ``"7"``; names pass through
    stripped.
    """

    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return "" if value is None else str(value).strip()

"""Normalization helpers.

Centralizes lenient parsing of loosely typed protocol values.  Integers and
integer strings are parsed exactly; only other input goes through ``float``.
"""

from __future__ import annotations

import math
from typing import Any


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or value == "--":
        return None
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(result):
        return None
    return result


def _exact_int(value: Any) -> int | None:
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def safe_int(value: Any) -> int | None:
    exact = _exact_int(value)
    if exact is not None:
        return exact
    parsed = safe_float(value)
    if parsed is None or not math.isfinite(parsed):
        return None
    return int(parsed)


def safe_code(value: Any) -> int | None:
    """Parse an integral protocol code; fractional values are not codes."""
    exact = _exact_int(value)
    if exact is not None:
        return exact
    parsed = safe_float(value)
    if parsed is None or not parsed.is_integer():
        return None
    return int(parsed)

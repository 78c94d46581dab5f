from __future__ import annotations

import math

from pyrobovac.ingestion.normalize import safe_code, safe_float, safe_int


def test_safe_float() -> None:
    assert safe_float("1.5") == 1.5
    assert safe_float(None) is None
    assert safe_float("") is None
    assert safe_float("--") is None
    assert safe_float("abc") is None
    assert safe_float(math.nan) is None


def test_safe_int_rejects_non_finite() -> None:
    assert safe_int("7") == 7
    assert safe_int(7.9) == 7
    assert safe_int(math.inf) is None
    assert safe_int({"a": 1}) is None


def test_safe_code_requires_integral_values() -> None:
    assert safe_code("17") == 17
    assert safe_code(17.0) == 17
    assert safe_code(17.5) is None
    assert safe_code(math.inf) is None


def test_integers_are_parsed_without_float_rounding() -> None:
    assert safe_int((1 << 53) | 1) == (1 << 53) | 1
    assert safe_int(str((1 << 53) | 1)) == (1 << 53) | 1
    assert safe_code(10**400) == 10**400


def test_values_beyond_float_range_never_raise() -> None:
    assert safe_float(10**400) is None
    assert safe_int(10**400) == 10**400
    assert safe_code(" 42 ") == 42

"""Docking-station status word decoder."""

from __future__ import annotations

from typing import Any

from pyrobovac.ingestion.normalize import safe_int
from pyrobovac.models.docking import DockComponentStatus, DockingStationStatus

_FIELD_WIDTH = 2
_FIELD_MASK = 0b11


def _coerce_word(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    return safe_int(value)


def decode_docking_station_status(value: Any) -> DockingStationStatus | None:
    """Decode a packed docking-station status word.

    Extracts six 2-bit fields at offsets 0, 2, 4, 6, 8 and 10.  Numeric
    strings are accepted and integers of any size are masked exactly.
    Anything non-numeric (or NaN/infinite) yields ``None``; malformed
    words are tolerated, never raised.
    """
    word = _coerce_word(value)
    if word is None:
        return None

    fields = {
        name: DockComponentStatus((word >> (index * _FIELD_WIDTH)) & _FIELD_MASK)
        for index, name in enumerate(DockingStationStatus.FIELD_ORDER)
    }
    return DockingStationStatus(**fields)


def encode_docking_station_status(status: DockingStationStatus) -> int:
    """Pack a :class:`DockingStationStatus` back into a status word."""
    word = 0
    for index, value in enumerate(status.as_tuple()):
        word |= (value & _FIELD_MASK) << (index * _FIELD_WIDTH)
    return word

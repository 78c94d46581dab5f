"""Capability identifiers."""

from __future__ import annotations

from enum import StrEnum


class Feature(StrEnum):
    """Optional device capability enabled at runtime."""

    CLEANING_RECORDS = "cleaning_records"
    MAP = "map"
    WATER_SHORTAGE = "water_shortage"
    CONSUMABLES = "consumables"
    DOCKING_STATION_STATUS = "docking_station_status"
    AUTO_EMPTY_DOCK = "auto_empty_dock"
    MOP_WASH = "mop_wash"
    MOP_DRY = "mop_dry"

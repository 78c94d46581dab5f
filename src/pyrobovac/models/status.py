"""Known status-property kinds.

Status payloads are flat ``{property: value}`` mappings.  A handful of
properties get dedicated handling (value-table translation, command
mirroring); every other key takes the generic path.
"""

from __future__ import annotations

from enum import StrEnum

from pyrobovac._constants import ERROR_CODES, STATE_CODES


class StatusProperty(StrEnum):
    """Status properties with a dedicated handler."""

    STATE = "state"
    ERROR_CODE = "error_code"
    FAN_POWER = "fan_power"
    MOP_MODE = "mop_mode"
    WATER_BOX_MODE = "water_box_mode"

    @classmethod
    def classify(cls, key: str) -> StatusProperty | None:
        """Return the kind for *key*, or ``None`` for the generic path."""
        try:
            return cls(key)
        except ValueError:
            return None

    @property
    def command(self) -> str | None:
        """Command state kept in sync with this property, if any."""
        return COMMAND_MIRRORS.get(self)


COMMAND_MIRRORS: dict[StatusProperty, str] = {
    StatusProperty.FAN_POWER: "set_custom_mode",
    StatusProperty.MOP_MODE: "set_mop_mode",
    StatusProperty.WATER_BOX_MODE: "set_water_box_custom_mode",
}

# Tables used when a profile carries no override.
DEFAULT_TABLES: dict[StatusProperty, dict[int, str]] = {
    StatusProperty.STATE: STATE_CODES,
    StatusProperty.ERROR_CODE: ERROR_CODES,
}

DOCKING_STATION_STATUS_KEY = "dss"
DOCK_TYPE_KEY = "dock_type"
MAP_STATUS_KEY = "map_status"
CLEAN_AREA_KEY = "clean_area"
CLEAN_TIME_KEY = "clean_time"
WATER_SHORTAGE_STATUS_KEY = "water_shortage_status"

"""Per-model value-mapping profiles.

A profile translates raw protocol codes (fan power, mop mode, water box
mode, error and state codes) into display labels, and carries capability
flags consulted by the device session.

Profiles defined in this module are *templates*.  A device session always
works on its own deep copy (:meth:`VacuumProfile.clone`), so mutating one
session's tables can never leak into another session or into the template.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from pyrobovac.models._base import RobovacBaseModel

BASE_FAN: dict[int, str] = {101: "Quiet", 102: "Balanced", 103: "Turbo", 104: "Max"}
BASE_WATER: dict[int, str] = {200: "Off", 201: "Mild", 202: "Moderate", 203: "Intense"}
BASE_MOP: dict[int, str] = {300: "Standard", 301: "Deep", 303: "Deep+"}

# Composite "fan/mop/water" presets offered when a profile defines none.
DEFAULT_CLEAN_MOTOR_MODE_PRESETS: dict[str, str] = {
    '{"fan_power":102,"mop_mode":300,"water_box_mode":201}': "Custom",
    '{"fan_power":102,"mop_mode":300,"water_box_mode":200}': "Vacuum",
    '{"fan_power":105,"mop_mode":303,"water_box_mode":202}': "Mop",
    '{"fan_power":102,"mop_mode":301,"water_box_mode":201}': "Vac & Mop",
    '{"fan_power":102,"mop_mode":306,"water_box_mode":201}': "Vacuum, then Mop",
    '{"fan_power":106,"mop_mode":302,"water_box_mode":204}': "Smart Plan",
}


class ProfileMappings(RobovacBaseModel):
    """Code → label tables.  Only ``fan_power`` is mandatory."""

    fan_power: dict[int, str]
    mop_mode: dict[int, str] | None = None
    water_box_mode: dict[int, str] | None = None
    error_code: dict[int, str] | None = None
    state: dict[int, str] | None = None

    def table(self, prop: str) -> dict[int, str] | None:
        """Return the table for *prop*, or ``None`` when the model omits it."""
        if prop not in type(self).model_fields:
            return None
        value: dict[int, str] | None = getattr(self, prop)
        return value


class VacuumProfile(RobovacBaseModel):
    """Value mappings and capability flags for one device model."""

    mappings: ProfileMappings
    name: str | None = None
    features: dict[str, Any] = Field(default_factory=dict)
    """Capability flags, e.g. ``{"has_distance_off": True}``."""
    clean_motor_mode_presets: dict[str, str] | None = None
    consumable_life_hours: dict[str, float] | None = None

    def clone(self) -> VacuumProfile:
        """Deep copy; no nested table is shared with the original."""
        return self.model_copy(deep=True)

    def has_feature(self, flag: str) -> bool:
        return bool(self.features.get(flag))

    @property
    def presets(self) -> dict[str, str]:
        """Clean-motor-mode presets, falling back to the defaults."""
        return self.clean_motor_mode_presets or dict(DEFAULT_CLEAN_MOTOR_MODE_PRESETS)


DEFAULT_PROFILE = VacuumProfile(
    mappings=ProfileMappings(
        fan_power=BASE_FAN,
        mop_mode=BASE_MOP,
        water_box_mode=BASE_WATER,
    ),
)

# Models that are vacuum-only ship without mop/water tables.
_VACUUM_ONLY = VacuumProfile(
    name="vacuum-only",
    mappings=ProfileMappings(fan_power={**BASE_FAN, 105: "Max+"}),
)

_A101 = VacuumProfile(
    name="a101",
    mappings=ProfileMappings(
        fan_power={**BASE_FAN, 105: "Off", 106: "Custom", 108: "Max+"},
        mop_mode={**BASE_MOP, 302: "Custom", 306: "Fast"},
        water_box_mode={**BASE_WATER, 204: "Custom"},
    ),
    features={"has_distance_off": True},
    clean_motor_mode_presets={
        '{"fan_power":102,"mop_mode":300,"water_box_mode":201}': "Vac & Mop",
        '{"fan_power":102,"mop_mode":300,"water_box_mode":200}': "Vacuum",
        '{"fan_power":105,"mop_mode":303,"water_box_mode":202}': "Mop",
    },
)

MODEL_PROFILES: dict[str, VacuumProfile] = {
    "roborock.vacuum.s5": _VACUUM_ONLY,
    "roborock.vacuum.a101": _A101,
}


def resolve_profile(robot_model: str | None) -> VacuumProfile:
    """Return a private copy of the template for *robot_model* (or the default)."""
    template = MODEL_PROFILES.get((robot_model or "").strip().lower(), DEFAULT_PROFILE)
    return template.clone()

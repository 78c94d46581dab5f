from __future__ import annotations

from pyrobovac.device import VacuumDevice
from pyrobovac.models.profile import (
    BASE_FAN,
    DEFAULT_CLEAN_MOTOR_MODE_PRESETS,
    DEFAULT_PROFILE,
    MODEL_PROFILES,
    ProfileMappings,
    VacuumProfile,
    resolve_profile,
)
from pyrobovac.services import DeviceDependencies


def test_sessions_never_share_profile_tables(deps: DeviceDependencies) -> None:
    first = VacuumDevice(deps, "a", "roborock.vacuum.s7")
    second = VacuumDevice(deps, "b", "roborock.vacuum.s7")

    first.profile.mappings.fan_power[999] = "Hacked"
    first.profile.features["has_distance_off"] = True

    assert 999 not in second.profile.mappings.fan_power
    assert 999 not in DEFAULT_PROFILE.mappings.fan_power
    assert 999 not in BASE_FAN
    assert not second.profile.has_feature("has_distance_off")
    assert not DEFAULT_PROFILE.has_feature("has_distance_off")


def test_explicit_profile_is_copied(deps: DeviceDependencies) -> None:
    template = VacuumProfile(mappings=ProfileMappings(fan_power={1: "One"}))
    device = VacuumDevice(deps, "a", "custom", profile=template)

    device.profile.mappings.fan_power[2] = "Two"

    assert device.profile is not template
    assert template.mappings.fan_power == {1: "One"}


def test_resolve_profile_known_and_unknown_models() -> None:
    a101 = resolve_profile("Roborock.Vacuum.A101")
    fallback = resolve_profile("some.other.model")

    assert a101.has_feature("has_distance_off")
    assert a101 is not MODEL_PROFILES["roborock.vacuum.a101"]
    assert fallback == DEFAULT_PROFILE
    assert fallback is not DEFAULT_PROFILE
    assert resolve_profile(None) == DEFAULT_PROFILE


def test_mappings_table_lookup() -> None:
    mappings = ProfileMappings(fan_power=BASE_FAN)

    assert mappings.table("fan_power") == BASE_FAN
    assert mappings.table("mop_mode") is None
    assert mappings.table("battery") is None


def test_profile_accepts_camel_case_aliases() -> None:
    profile = VacuumProfile.model_validate(
        {
            "mappings": {"fanPower": {"101": "Quiet"}, "waterBoxMode": {"200": "Off"}},
            "cleanMotorModePresets": {"x": "Only"},
        }
    )

    assert profile.mappings.fan_power == {101: "Quiet"}
    assert profile.mappings.water_box_mode == {200: "Off"}
    assert profile.presets == {"x": "Only"}


def test_presets_fall_back_to_defaults() -> None:
    profile = resolve_profile("roborock.vacuum.s7")

    presets = profile.presets
    presets["extra"] = "Mutated"

    assert profile.presets == DEFAULT_CLEAN_MOTOR_MODE_PRESETS
    assert "extra" not in DEFAULT_CLEAN_MOTOR_MODE_PRESETS

"""Device session for protocol V1 cleaning robots.

A :class:`VacuumDevice` owns one robot's profile and capability registry
and turns everything the robot reports into writes on a
:class:`pyrobovac.state.StateStore`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pyrobovac._constants import (
    CLEANING_INFO,
    CLEANING_RECORDS,
    CONSUMABLE_LIFE_HOURS,
    CONSUMABLES,
    DEVICE_STATES,
    FIRMWARE_FEATURES,
    NETWORK_INFO,
    RESET_CONSUMABLES,
)
from pyrobovac._redact import redact_for_log
from pyrobovac._tasks import run_batch
from pyrobovac.config import DeviceModelConfig
from pyrobovac.docking import decode_docking_station_status
from pyrobovac.exceptions import RobovacProtocolError
from pyrobovac.features import CapabilityRegistry, Feature, detect_runtime_features, resolve_dock_type
from pyrobovac.ingestion import status as _status
from pyrobovac.ingestion.normalize import safe_int
from pyrobovac.models.docking import DOCK_COMPONENT_LABELS, DOCKING_STATION_STATES
from pyrobovac.models.profile import VacuumProfile, resolve_profile
from pyrobovac.models.status import DOCK_TYPE_KEY, DOCKING_STATION_STATUS_KEY, MAP_STATUS_KEY, StatusProperty
from pyrobovac.services import DeviceDependencies
from pyrobovac.state.declaration import StateDeclaration, boolean, button, infer_declaration, json_value, number, text
from pyrobovac.state.store import StateStore

_logger = logging.getLogger(__name__)

DEVICE_STATUS_FOLDER = _status.DEVICE_STATUS_FOLDER
COMMANDS_FOLDER = _status.COMMANDS_FOLDER
DOCKING_STATION_FOLDER = "dockingStationStatus"
FIRMWARE_FEATURES_FOLDER = "firmwareFeatures"
NETWORK_INFO_FOLDER = "networkInfo"
DEVICE_INFO_FOLDER = "deviceInfo"
CONSUMABLES_FOLDER = "consumables"
CLEANING_INFO_FOLDER = "cleaningInfo"

_FOLDER_DECLARATIONS: dict[str, Mapping[str, StateDeclaration]] = {
    DEVICE_STATUS_FOLDER: DEVICE_STATES,
    CONSUMABLES_FOLDER: CONSUMABLES,
    CLEANING_INFO_FOLDER: CLEANING_INFO,
    NETWORK_INFO_FOLDER: NETWORK_INFO,
}


def _to_state_value(value: Any) -> Any:
    """Mappings and sequences are persisted as JSON text, keys in payload order."""
    if isinstance(value, Mapping):
        return json.dumps(dict(value), separators=(",", ":"))
    if isinstance(value, (list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return value


def _unwrap_status(payload: Any) -> dict[str, Any]:
    # The robot answers get_status with either the snapshot or a one-element list of it.
    if isinstance(payload, Sequence) and not isinstance(payload, (str, bytes)) and len(payload) == 1:
        payload = payload[0]
    if not isinstance(payload, Mapping):
        raise RobovacProtocolError(
            f"Status payload must be a mapping, got {type(payload).__name__}",
            operation="get_status",
        )
    return dict(payload)


class VacuumDevice:
    """Session for one protocol V1 cleaning robot.

    Usage::

        device = VacuumDevice(deps, duid, "roborock.vacuum.a101")
        await device.setup_protocol_features()
        await device.initialize_device_data()
        ...
        changed = await device.detect_and_apply_runtime_features(payload)
    """

    def __init__(
        self,
        dependencies: DeviceDependencies,
        duid: str,
        robot_model: str,
        config: DeviceModelConfig | None = None,
        profile: VacuumProfile | None = None,
    ) -> None:
        self._deps = dependencies
        self.duid = duid
        self.robot_model = robot_model
        self.config = config or DeviceModelConfig()
        # Always a private deep copy; never the caller's or a shared template.
        self.profile = profile.clone() if profile is not None else resolve_profile(robot_model)
        self.features = CapabilityRegistry(self.config.static_features)
        self.runtime_detection_complete = False

        self.features.register(Feature.MAP, self.update_map)
        self.features.register(Feature.CONSUMABLES, self.update_consumables)
        self.features.register(Feature.DOCKING_STATION_STATUS, self._create_docking_station_status_states)
        self.features.register(Feature.AUTO_EMPTY_DOCK, self._init_auto_empty_dock)
        self.features.register(Feature.MOP_WASH, self._init_mop_wash)
        self.features.register(Feature.MOP_DRY, self._init_mop_dry)

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------

    @property
    def store(self) -> StateStore:
        return self._deps.store

    def state_id(self, folder: str, key: str) -> str:
        return f"{self.config.state_root}.{self.duid}.{folder}.{key}"

    def translate(self, key: str, default: str) -> str:
        return self._deps.translate(key, default)

    async def ensure_state(self, folder: str, key: str, declaration: StateDeclaration) -> None:
        await self.store.ensure(self.state_id(folder, key), declaration)

    async def add_command(self, name: str, declaration: StateDeclaration) -> None:
        await self.ensure_state(COMMANDS_FOLDER, name, declaration)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def initialize_device_data(self) -> None:
        """Populate a freshly constructed session.

        Floor list, status and map image are strict sequential steps; the
        four independent refreshes run as one batch; consumable percentages
        run last.  A failure aborts every later step.
        """
        _logger.debug("[%s] Starting sequential initialization", self.duid)
        await self.update_multi_maps_list()
        await self.update_status()
        await self.update_map()

        await run_batch(
            f"initialize {self.duid}",
            (
                self.update_firmware_features(),
                self.update_consumables(),
                self.update_network_info(),
                self.update_timers(),
            ),
        )
        await self.update_consumables_percent()
        _logger.debug("[%s] Sequential initialization complete", self.duid)

    async def setup_protocol_features(self) -> None:
        """Declare the standard V1 command set and provision static capabilities."""
        t = self.translate
        fan_power = self.profile.mappings.fan_power

        for name, label in (
            ("app_start", "Start"),
            ("app_stop", "Stop"),
            ("app_pause", "Pause"),
            ("app_charge", "Charge"),
            ("find_me", "Find Me"),
            ("app_spot", "Spot Cleaning"),
            ("app_segment_clean", "Segment Cleaning"),
            ("resume_zoned_clean", "Resume Zone Clean"),
            ("stop_zoned_clean", "Stop Zone Clean"),
            ("resume_segment_clean", "Resume Segment Clean"),
            ("stop_segment_clean", "Stop Segment Clean"),
        ):
            await self.add_command(name, button(t(name, label)))

        await self.add_command("app_zoned_clean", json_value(role="json", name="Zone Clean", writable=True))
        await self.add_command("app_goto_target", json_value(role="json", name="Go To Target", writable=True))
        await self.add_command("load_multi_map", number(role="level", name="Load Map", writable=True, default=0))

        await self.add_command(
            "set_custom_mode",
            number(
                role="level",
                name=t("fan_power", "Fan Power"),
                states=fan_power,
                writable=True,
                default=next(iter(fan_power), None),
            ),
        )

        presets = self.profile.presets
        await self.add_command(
            "set_clean_motor_mode",
            text(name="Set Custom Cleaning Mode", states=presets, writable=True, default=next(iter(presets))),
        )

        water_box_mode = self.profile.mappings.water_box_mode
        if water_box_mode is not None:
            await self.add_command(
                "set_water_box_custom_mode",
                number(
                    role="level",
                    name=t("water_box_mode", "Water Box Mode"),
                    states=water_box_mode,
                    writable=True,
                    default=next(iter(water_box_mode), None),
                ),
            )

        mop_mode = self.profile.mappings.mop_mode
        if mop_mode is not None:
            await self.add_command(
                "set_mop_mode",
                number(
                    role="level",
                    name=t("mop_mode", "Mop Mode"),
                    states=mop_mode,
                    writable=True,
                    default=next(iter(mop_mode), None),
                ),
            )

        if self.profile.has_feature("has_distance_off"):
            await self.add_command(
                "set_water_box_distance_off",
                number(
                    role="level",
                    name=t("water_box_distance_off", "Water Box Distance Off (1-30)"),
                    min=1,
                    max=30,
                    unit="",
                    writable=True,
                    default=1,
                ),
            )

        await self.add_command(
            "set_clean_repeat_times",
            number(name="Clean Repeat Times", min=1, max=2, states={1: "1x", 2: "2x"}, writable=True, default=1),
        )

        await self.features.run_pending_setup()

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    async def apply_feature(self, feature: Feature) -> bool:
        """Enable *feature*; return whether this call changed anything."""
        changed = await self.features.enable(feature)
        if changed:
            _logger.debug("[%s] Capability %s enabled", self.duid, feature.value)
        return changed

    async def detect_and_apply_runtime_features(self, status: Mapping[str, Any]) -> bool:
        """Enable capabilities evidenced by *status*.

        Returns ``True`` if any capability was newly enabled, or if this is
        the first completed detection round.  A payload carrying a ``state``
        is also processed in full before returning.
        """
        changed = False
        for feature in detect_runtime_features(status):
            if await self.apply_feature(feature):
                changed = True

        if status.get(StatusProperty.STATE.value) is not None:
            await self.process_status(status)

        if not self.runtime_detection_complete:
            self.runtime_detection_complete = True
            changed = True
        return changed

    async def process_dock_type(self, dock_type: Any) -> None:
        """Enable the capabilities implied by the attached dock, in table order."""
        for feature in resolve_dock_type(dock_type):
            await self.apply_feature(feature)

    async def _create_docking_station_status_states(self) -> None:
        for key, name in DOCKING_STATION_STATES:
            await self.ensure_state(
                DOCKING_STATION_FOLDER,
                key,
                number(name=name, states=DOCK_COMPONENT_LABELS),
            )

    async def _init_auto_empty_dock(self) -> None:
        await self.add_command("app_start_dust_collection", button("Empty Dust"))

    async def _init_mop_wash(self) -> None:
        await self.add_command("app_start_wash", button("Start Mop Wash"))
        await self.add_command("app_stop_wash", button("Stop Mop Wash"))

    async def _init_mop_dry(self) -> None:
        await self.add_command("app_start_mop_drying", button("Start Mop Drying"))
        await self.add_command("app_stop_mop_drying", button("Stop Mop Drying"))

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    async def process_status(self, status: Mapping[str, Any] | None) -> None:
        """Persist a status payload and mirror adjustable settings into their commands."""
        await _status.process_status(self, status)

    async def update_docking_station_status(self, dss: Any) -> None:
        """Decode the docking-station word and persist its six sub-statuses."""
        decoded = decode_docking_station_status(dss)
        if decoded is None:
            return
        for key, value in decoded.items():
            await self.store.set_acknowledged(self.state_id(DOCKING_STATION_FOLDER, key), int(value))

    async def process_result_key(self, folder: str, key: str, value: Any) -> None:
        """Declare and persist a property that has no dedicated handler."""
        if key == MAP_STATUS_KEY:
            map_status = safe_int(value)
            if map_status is not None and self._deps.maps.update_current_map_index(map_status):
                _logger.info(
                    "[%s] Map changed to index %s. Updating room mapping.",
                    self.duid,
                    self._deps.maps.current_index,
                )
                await self.update_room_mapping()
        elif key == DOCK_TYPE_KEY:
            await self.process_dock_type(value)

        declaration = _FOLDER_DECLARATIONS.get(folder, {}).get(key) or infer_declaration(value)
        await self.ensure_state(folder, key, declaration.with_name(key))
        await self.store.set_if_changed(self.state_id(folder, key), _to_state_value(value))

        if key == DOCKING_STATION_STATUS_KEY and isinstance(value, int) and not isinstance(value, bool):
            await self.update_docking_station_status(value)

    async def update_status(self) -> None:
        """Fetch the current status and run detection plus status processing."""
        status = _unwrap_status(await self._deps.transport.get_status())
        _logger.debug("[%s] Status: %s", self.duid, redact_for_log(status))

        if await self.detect_and_apply_runtime_features(status):
            _logger.debug("[%s] Capabilities now %s", self.duid, sorted(self.features.enabled))
        if status.get(StatusProperty.STATE.value) is None:
            await self.process_status(status)

    # ------------------------------------------------------------------
    # Refreshes
    # ------------------------------------------------------------------

    async def update_multi_maps_list(self) -> None:
        await self._deps.maps.update_multi_maps_list()

    async def update_map(self) -> None:
        await self._deps.maps.update_map()

    async def update_room_mapping(self) -> None:
        await self._deps.maps.update_room_mapping()

    async def update_consumables(self) -> None:
        await self._deps.consumables.update_consumables()

    async def update_consumables_percent(self) -> None:
        await self._deps.consumables.update_consumables_percent()

    async def update_firmware_features(self) -> None:
        """Persist one indicator per firmware feature id the robot reports."""
        feature_ids = await self._deps.transport.get_firmware_features()
        for feature_id in feature_ids:
            key = str(feature_id)
            await self.ensure_state(
                FIRMWARE_FEATURES_FOLDER,
                key,
                boolean(role="indicator", name=self.get_firmware_feature_name(feature_id)),
            )
            await self.store.set_acknowledged(self.state_id(FIRMWARE_FEATURES_FOLDER, key), True)

    async def update_network_info(self) -> None:
        info = await self._deps.transport.get_network_info()
        if not isinstance(info, Mapping):
            raise RobovacProtocolError(
                f"Network info must be a mapping, got {type(info).__name__}",
                operation="get_network_info",
            )
        _logger.debug("[%s] Network info: %s", self.duid, redact_for_log(info))
        for key, value in info.items():
            await self.process_result_key(NETWORK_INFO_FOLDER, str(key), value)

    async def update_timers(self) -> None:
        timers = await self._deps.transport.get_timers()
        await self.ensure_state(DEVICE_INFO_FOLDER, "timers", json_value(role="json", name="Timers"))
        await self.store.set_if_changed(self.state_id(DEVICE_INFO_FOLDER, "timers"), _to_state_value(list(timers)))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_current_map_index(self) -> int:
        return self._deps.maps.current_index

    async def get_cleaning_record_map(self, start_time: int) -> Any:
        """Fetch the map recorded for the cleaning run that started at *start_time*."""
        return await self._deps.maps.get_cleaning_record_map(start_time)

    def get_common_consumable(self, attribute: str | int) -> StateDeclaration | None:
        return CONSUMABLES.get(str(attribute))

    def is_resetable_consumable(self, consumable: str) -> bool:
        return consumable in RESET_CONSUMABLES

    def get_consumable_life_hours(self, consumable: str) -> float | None:
        overrides = self.profile.consumable_life_hours or {}
        return overrides.get(consumable, CONSUMABLE_LIFE_HOURS.get(consumable))

    def get_common_device_state(self, attribute: str | int) -> StateDeclaration | None:
        return DEVICE_STATES.get(str(attribute))

    def get_common_cleaning_record(self, attribute: str | int) -> StateDeclaration | None:
        return CLEANING_RECORDS.get(str(attribute))

    def get_common_cleaning_info(self, attribute: str | int) -> StateDeclaration | None:
        return CLEANING_INFO.get(str(attribute))

    def get_firmware_feature_name(self, feature_id: str | int) -> str:
        code = safe_int(feature_id)
        name = FIRMWARE_FEATURES.get(code) if code is not None else None
        return name or f"Feature {feature_id}"

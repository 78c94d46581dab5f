"""Collaborator interfaces consumed by the device session.

Structural protocols make it easy to pass test doubles while production
code plugs in the real transport, map and consumable services.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Protocol

from pyrobovac.state.store import StateStore


class DeviceTransport(Protocol):
    """Request/response channel to the robot."""

    async def get_status(self) -> Any:
        """Return the current status snapshot (a mapping, or a one-element list of one)."""
        ...

    async def get_firmware_features(self) -> list[int]: ...

    async def get_network_info(self) -> Mapping[str, Any]: ...

    async def get_timers(self) -> list[Any]: ...


class MapService(Protocol):
    """Floor list, map image and room-mapping synchronization."""

    @property
    def current_index(self) -> int: ...

    async def update_multi_maps_list(self) -> None: ...

    async def update_map(self) -> None: ...

    def update_current_map_index(self, map_status: int) -> bool:
        """Record the map reported by ``map_status``; return whether the floor changed."""
        ...

    async def update_room_mapping(self) -> None: ...

    async def get_cleaning_record_map(self, start_time: int) -> Any:
        """Map image of the cleaning run that started at *start_time* (epoch seconds)."""
        ...


class ConsumableService(Protocol):
    """Consumable wear counters and derived percentages."""

    async def update_consumables(self) -> None: ...

    async def update_consumables_percent(self) -> None: ...


@dataclasses.dataclass
class DeviceDependencies:
    """Everything a device session needs from the outside world."""

    store: StateStore
    transport: DeviceTransport
    maps: MapService
    consumables: ConsumableService
    translations: Mapping[str, str] = dataclasses.field(default_factory=dict)

    def translate(self, key: str, default: str) -> str:
        return self.translations.get(key) or default

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import pytest

from pyrobovac.device import VacuumDevice
from pyrobovac.services import DeviceDependencies
from pyrobovac.state.store import InMemoryStateStore

DUID = "duid-1"


@dataclass
class CallLog:
    """Shared, ordered record of collaborator calls.

    Every fake call appends ``name`` when it starts and ``name:done`` when it
    finishes, yielding to the event loop in between so concurrent calls
    interleave the way real I/O would.
    """

    calls: list[str] = field(default_factory=list)
    failures: dict[str, Exception] = field(default_factory=dict)

    async def record(self, name: str) -> None:
        self.calls.append(name)
        await asyncio.sleep(0)
        if name in self.failures:
            raise self.failures[name]
        self.calls.append(f"{name}:done")

    def count(self, name: str) -> int:
        return self.calls.count(name)


@dataclass
class FakeMapService:
    log: CallLog
    current_index: int = 0

    async def update_multi_maps_list(self) -> None:
        await self.log.record("update_multi_maps_list")

    async def update_map(self) -> None:
        await self.log.record("update_map")

    def update_current_map_index(self, map_status: int) -> bool:
        index = map_status >> 2
        changed = index != self.current_index
        self.current_index = index
        return changed

    async def update_room_mapping(self) -> None:
        await self.log.record("update_room_mapping")

    async def get_cleaning_record_map(self, start_time: int) -> dict[str, Any]:
        await self.log.record("get_cleaning_record_map")
        return {"start_time": start_time, "image": b"png"}


@dataclass
class FakeConsumableService:
    log: CallLog

    async def update_consumables(self) -> None:
        await self.log.record("update_consumables")

    async def update_consumables_percent(self) -> None:
        await self.log.record("update_consumables_percent")


@dataclass
class FakeTransport:
    log: CallLog
    status: Any = field(default_factory=lambda: {"state": 8, "battery": 100, "fan_power": 102})
    firmware_features: list[int] = field(default_factory=lambda: [111, 120, 999])
    network_info: Any = field(default_factory=lambda: {"ssid": "home", "ip": "192.168.1.20", "rssi": -51})
    timers: list[Any] = field(default_factory=list)

    async def get_status(self) -> Any:
        await self.log.record("get_status")
        return self.status

    async def get_firmware_features(self) -> list[int]:
        await self.log.record("get_firmware_features")
        return self.firmware_features

    async def get_network_info(self) -> Any:
        await self.log.record("get_network_info")
        return self.network_info

    async def get_timers(self) -> list[Any]:
        await self.log.record("get_timers")
        return self.timers


@pytest.fixture
def log() -> CallLog:
    return CallLog()


@pytest.fixture
def store() -> InMemoryStateStore:
    return InMemoryStateStore()


@pytest.fixture
def transport(log: CallLog) -> FakeTransport:
    return FakeTransport(log)


@pytest.fixture
def maps(log: CallLog) -> FakeMapService:
    return FakeMapService(log)


@pytest.fixture
def deps(
    store: InMemoryStateStore,
    transport: FakeTransport,
    maps: FakeMapService,
    log: CallLog,
) -> DeviceDependencies:
    return DeviceDependencies(
        store=store,
        transport=transport,
        maps=maps,
        consumables=FakeConsumableService(log),
        translations={"fan_power": "Suction"},
    )


@pytest.fixture
def device(deps: DeviceDependencies) -> VacuumDevice:
    return VacuumDevice(deps, DUID, "roborock.vacuum.s7")

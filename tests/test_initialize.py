from __future__ import annotations

import pytest

from pyrobovac.device import VacuumDevice
from pyrobovac.exceptions import RobovacProtocolError
from pyrobovac.features import Feature
from pyrobovac.state.store import InMemoryStateStore

BATCH = ("get_firmware_features", "update_consumables", "get_network_info", "get_timers")


@pytest.mark.asyncio
async def test_initialize_runs_steps_in_order(device: VacuumDevice, log) -> None:
    await device.initialize_device_data()

    calls = log.calls
    assert calls[:4] == [
        "update_multi_maps_list",
        "update_multi_maps_list:done",
        "get_status",
        "get_status:done",
    ]
    # Detection enables consumables, whose setup runs before the map step.
    assert calls.index("update_consumables") < calls.index("update_map")
    map_done = calls.index("update_map:done")
    # All four batch members start before any of them finishes.
    assert sorted(calls[map_done + 1 : map_done + 5]) == sorted(BATCH)
    assert calls[-2:] == ["update_consumables_percent", "update_consumables_percent:done"]


@pytest.mark.asyncio
async def test_initialize_persists_collected_data(device: VacuumDevice, store: InMemoryStateStore) -> None:
    await device.initialize_device_data()

    assert store.get_value(device.state_id("deviceStatus", "state")) == 8
    assert store.get_value(device.state_id("firmwareFeatures", "111")) is True
    assert store.get_declaration(device.state_id("firmwareFeatures", "111")).name == "isSupportFDSEndPoint"
    assert store.get_declaration(device.state_id("firmwareFeatures", "999")).name == "Feature 999"
    assert store.get_value(device.state_id("networkInfo", "ssid")) == "home"
    assert store.get_value(device.state_id("networkInfo", "rssi")) == -51
    assert store.get_value(device.state_id("deviceInfo", "timers")) == "[]"
    assert device.runtime_detection_complete


@pytest.mark.asyncio
async def test_sequential_failure_aborts_later_steps(device: VacuumDevice, log) -> None:
    log.failures["get_status"] = TimeoutError("no answer")

    with pytest.raises(TimeoutError):
        await device.initialize_device_data()

    assert log.count("update_map") == 0
    assert not any(log.count(name) for name in BATCH)
    assert log.count("update_consumables_percent") == 0


@pytest.mark.asyncio
async def test_batch_failure_skips_percent_step(device: VacuumDevice, store: InMemoryStateStore, log) -> None:
    log.failures["get_network_info"] = ConnectionError("socket closed")

    with pytest.raises(ConnectionError):
        await device.initialize_device_data()

    assert log.count("update_consumables_percent") == 0
    # Siblings were not cancelled.
    assert "get_firmware_features:done" in log.calls
    assert "update_consumables:done" in log.calls
    assert store.get_value(device.state_id("firmwareFeatures", "120")) is True


@pytest.mark.asyncio
async def test_non_mapping_status_is_a_protocol_error(device: VacuumDevice, transport, log) -> None:
    transport.status = "not a status"

    with pytest.raises(RobovacProtocolError) as excinfo:
        await device.initialize_device_data()

    assert excinfo.value.operation == "get_status"
    assert log.count("update_map") == 0


@pytest.mark.asyncio
async def test_single_element_status_list_is_unwrapped(
    device: VacuumDevice, transport, store: InMemoryStateStore
) -> None:
    transport.status = [{"state": 6, "map_status": 3}]

    await device.update_status()

    assert store.get_value(device.state_id("deviceStatus", "state")) == 6
    assert device.features.is_enabled(Feature.MAP)


@pytest.mark.asyncio
async def test_status_without_state_is_still_processed(
    device: VacuumDevice, transport, store: InMemoryStateStore
) -> None:
    transport.status = {"battery": 42}

    await device.update_status()

    assert store.get_value(device.state_id("deviceStatus", "battery")) == 42
    assert len(store.writes_for(device.state_id("deviceStatus", "battery"))) == 1


@pytest.mark.asyncio
async def test_network_info_must_be_a_mapping(device: VacuumDevice, transport) -> None:
    transport.network_info = ["ssid"]

    with pytest.raises(RobovacProtocolError):
        await device.update_network_info()

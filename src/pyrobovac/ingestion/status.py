"""Status payload dispatch.

A status payload is a flat ``{property: value}`` snapshot.  The docking
station word is decoded first and removed; every remaining key is handled
concurrently by the handler for its :class:`StatusProperty` kind, or by the
device's generic result-key path when it has none.

These functions operate on a :class:`pyrobovac.device.VacuumDevice` and keep
``device.py`` focused on the session lifecycle.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Any

from pyrobovac._tasks import run_batch
from pyrobovac.models.status import DEFAULT_TABLES, DOCKING_STATION_STATUS_KEY, StatusProperty
from pyrobovac.state.declaration import number

if TYPE_CHECKING:
    from pyrobovac.device import VacuumDevice

DEVICE_STATUS_FOLDER = "deviceStatus"
COMMANDS_FOLDER = "commands"

_Handler = Callable[["VacuumDevice", StatusProperty, Any], Awaitable[None]]


async def process_status(device: VacuumDevice, status: Mapping[str, Any] | None) -> None:
    """Persist one status payload.

    The caller's mapping is never modified.  If any handler fails the first
    failure propagates; handlers that already ran keep their writes.
    """
    remaining = dict(status or {})

    if DOCKING_STATION_STATUS_KEY in remaining:
        await device.update_docking_station_status(remaining.pop(DOCKING_STATION_STATUS_KEY))

    await run_batch(
        f"status {device.duid}",
        (_dispatch(device, key, value) for key, value in remaining.items()),
    )


async def _dispatch(device: VacuumDevice, key: str, value: Any) -> None:
    kind = StatusProperty.classify(key)
    if kind is None:
        await device.process_result_key(DEVICE_STATUS_FOLDER, key, value)
        return
    await _HANDLERS[kind](device, kind, value)


async def _write_status(device: VacuumDevice, kind: StatusProperty, table: dict[int, str], value: Any) -> None:
    declaration = number(name=device.translate(kind.value, kind.value), states=table)
    await device.ensure_state(DEVICE_STATUS_FOLDER, kind.value, declaration)
    await device.store.set_if_changed(device.state_id(DEVICE_STATUS_FOLDER, kind.value), value)


async def _handle_code(device: VacuumDevice, kind: StatusProperty, value: Any) -> None:
    table = device.profile.mappings.table(kind.value)
    if table is None:
        table = DEFAULT_TABLES[kind]
    await _write_status(device, kind, table, value)


async def _handle_mirrored(device: VacuumDevice, kind: StatusProperty, value: Any) -> None:
    table = device.profile.mappings.table(kind.value)
    if table is None:
        # Model has no such setting; a default table would mislabel it.
        return
    await _write_status(device, kind, table, value)

    command = kind.command
    if command is not None:
        # Device-reported value always replaces a pending UI edit.
        await device.store.set_acknowledged(device.state_id(COMMANDS_FOLDER, command), value)


_HANDLERS: dict[StatusProperty, _Handler] = {
    StatusProperty.STATE: _handle_code,
    StatusProperty.ERROR_CODE: _handle_code,
    StatusProperty.FAN_POWER: _handle_mirrored,
    StatusProperty.MOP_MODE: _handle_mirrored,
    StatusProperty.WATER_BOX_MODE: _handle_mirrored,
}

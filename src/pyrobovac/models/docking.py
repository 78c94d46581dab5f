"""Docking-station status model.

The dock reports the condition of its tanks and consumables as one packed
integer: six 2-bit sub-statuses, least significant pair first.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import ClassVar

from pydantic import ConfigDict

from pyrobovac.models._base import RobovacBaseModel, RobovacEnum


class DockComponentStatus(RobovacEnum):
    """Condition of one dock component.

    ``RESERVED`` (3) is never sent by the protocol but must still decode.
    """

    UNKNOWN = 0
    ERROR = 1
    OK = 2
    RESERVED = 3


class DockingStationStatus(RobovacBaseModel):
    """Decoded docking-station status word."""

    model_config = ConfigDict(frozen=True)

    # Bit order: field N lives at offset 2*N.
    FIELD_ORDER: ClassVar[tuple[str, ...]] = (
        "clean_fluid_status",
        "water_box_filter_status",
        "dust_bag_status",
        "dirty_water_box_status",
        "clear_water_box_status",
        "is_updown_water_ready",
    )

    clean_fluid_status: DockComponentStatus
    water_box_filter_status: DockComponentStatus
    dust_bag_status: DockComponentStatus
    dirty_water_box_status: DockComponentStatus
    clear_water_box_status: DockComponentStatus
    is_updown_water_ready: DockComponentStatus

    def items(self) -> Iterator[tuple[str, DockComponentStatus]]:
        """Yield ``(state_key, status)`` pairs in bit order.

        State keys are the camelCase names used in the state tree
        (``cleanFluidStatus``, ``waterBoxFilterStatus``, ...).
        """
        fields = type(self).model_fields
        for name in self.FIELD_ORDER:
            alias = fields[name].alias or name
            yield alias, getattr(self, name)

    def as_tuple(self) -> tuple[int, ...]:
        return tuple(int(getattr(self, name)) for name in self.FIELD_ORDER)


# State key → display name, in bit order.
DOCKING_STATION_STATES: tuple[tuple[str, str], ...] = (
    ("cleanFluidStatus", "Clean Water Tank"),
    ("waterBoxFilterStatus", "Water Box Filter"),
    ("dustBagStatus", "Dust Bag"),
    ("dirtyWaterBoxStatus", "Dirty Water Tank"),
    ("clearWaterBoxStatus", "Clear Water Box"),
    ("isUpdownWaterReady", "Water Ready Status"),
)

DOCK_COMPONENT_LABELS: dict[int, str] = {
    DockComponentStatus.UNKNOWN.value: "UNKNOWN",
    DockComponentStatus.ERROR.value: "ERROR",
    DockComponentStatus.OK.value: "OK",
}

"""Runtime capability detection rules.

A capability is inferred from which keys appear in a status payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pyrobovac.features.capabilities import Feature
from pyrobovac.models.status import CLEAN_AREA_KEY, CLEAN_TIME_KEY, MAP_STATUS_KEY, WATER_SHORTAGE_STATUS_KEY


def detect_runtime_features(status: Mapping[str, Any]) -> tuple[Feature, ...]:
    """Return the capabilities evidenced by *status*, in evaluation order.

    Consumables are always part of the result; enabling them again is a
    no-op for the registry.
    """
    detected: list[Feature] = []
    if CLEAN_AREA_KEY in status or CLEAN_TIME_KEY in status:
        detected.append(Feature.CLEANING_RECORDS)
    if MAP_STATUS_KEY in status:
        detected.append(Feature.MAP)
    if status.get(WATER_SHORTAGE_STATUS_KEY) is not None:
        detected.append(Feature.WATER_SHORTAGE)
    detected.append(Feature.CONSUMABLES)
    return tuple(detected)

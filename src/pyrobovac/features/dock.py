"""Dock type → capability table."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pyrobovac.features.capabilities import Feature
from pyrobovac.ingestion.normalize import safe_code

DOCK_FEATURE_MAP: Mapping[int, tuple[Feature, ...]] = {
    1: (Feature.AUTO_EMPTY_DOCK, Feature.DOCKING_STATION_STATUS),
    2: (Feature.MOP_WASH, Feature.DOCKING_STATION_STATUS),
    3: (Feature.AUTO_EMPTY_DOCK, Feature.MOP_WASH, Feature.DOCKING_STATION_STATUS),
    4: (Feature.AUTO_EMPTY_DOCK, Feature.MOP_WASH, Feature.DOCKING_STATION_STATUS),
    17: (Feature.AUTO_EMPTY_DOCK, Feature.MOP_WASH, Feature.MOP_DRY, Feature.DOCKING_STATION_STATUS),
}


def resolve_dock_type(dock_type: Any) -> tuple[Feature, ...]:
    """Capabilities implied by *dock_type*; unknown codes imply none."""
    code = safe_code(dock_type)
    if code is None:
        return ()
    return DOCK_FEATURE_MAP.get(code, ())

"""Optional device capabilities and how they are discovered."""

from pyrobovac.features.capabilities import Feature
from pyrobovac.features.detection import detect_runtime_features
from pyrobovac.features.dock import DOCK_FEATURE_MAP, resolve_dock_type
from pyrobovac.features.registry import CapabilityRegistry, SetupRoutine

__all__ = [
    "CapabilityRegistry",
    "DOCK_FEATURE_MAP",
    "Feature",
    "SetupRoutine",
    "detect_runtime_features",
    "resolve_dock_type",
]

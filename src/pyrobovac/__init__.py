"""pyrobovac - Capability detection and status synchronization for cleaning robots."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyrobovac")
except PackageNotFoundError:
    __version__ = "0+local"
from pyrobovac.config import DeviceModelConfig
from pyrobovac.device import VacuumDevice
from pyrobovac.docking import decode_docking_station_status
from pyrobovac.exceptions import RobovacConfigError, RobovacError, RobovacProtocolError
from pyrobovac.features import CapabilityRegistry, Feature, resolve_dock_type
from pyrobovac.models import (
    DEFAULT_PROFILE,
    DockComponentStatus,
    DockingStationStatus,
    ProfileMappings,
    StatusProperty,
    VacuumProfile,
    resolve_profile,
)
from pyrobovac.services import ConsumableService, DeviceDependencies, DeviceTransport, MapService
from pyrobovac.state import InMemoryStateStore, StateDeclaration, StateStore

__all__ = [
    "__version__",
    "CapabilityRegistry",
    "ConsumableService",
    "DEFAULT_PROFILE",
    "DeviceDependencies",
    "DeviceModelConfig",
    "DeviceTransport",
    "DockComponentStatus",
    "DockingStationStatus",
    "Feature",
    "InMemoryStateStore",
    "MapService",
    "ProfileMappings",
    "RobovacConfigError",
    "RobovacError",
    "RobovacProtocolError",
    "StateDeclaration",
    "StateStore",
    "StatusProperty",
    "VacuumDevice",
    "VacuumProfile",
    "decode_docking_station_status",
    "resolve_dock_type",
    "resolve_profile",
]

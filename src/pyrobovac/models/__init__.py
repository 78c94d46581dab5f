"""Data models for pyrobovac."""

from pyrobovac.models._base import RobovacBaseModel, RobovacEnum
from pyrobovac.models.docking import DOCKING_STATION_STATES, DockComponentStatus, DockingStationStatus
from pyrobovac.models.profile import (
    BASE_FAN,
    BASE_MOP,
    BASE_WATER,
    DEFAULT_PROFILE,
    MODEL_PROFILES,
    ProfileMappings,
    VacuumProfile,
    resolve_profile,
)
from pyrobovac.models.status import COMMAND_MIRRORS, StatusProperty

__all__ = [
    "BASE_FAN",
    "BASE_MOP",
    "BASE_WATER",
    "COMMAND_MIRRORS",
    "DEFAULT_PROFILE",
    "DOCKING_STATION_STATES",
    "DockComponentStatus",
    "DockingStationStatus",
    "MODEL_PROFILES",
    "ProfileMappings",
    "RobovacBaseModel",
    "RobovacEnum",
    "StatusProperty",
    "VacuumProfile",
    "resolve_profile",
]

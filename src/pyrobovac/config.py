"""Device session configuration for pyrobovac."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Iterable
from typing import Any

from pyrobovac.exceptions import RobovacConfigError
from pyrobovac.features.capabilities import Feature

DEFAULT_STATE_ROOT = "Devices"


def _parse_features(value: str | Iterable[str | Feature]) -> frozenset[Feature]:
    items = value.split(",") if isinstance(value, str) else value
    features: set[Feature] = set()
    for item in items:
        name = str(item).strip().lower()
        if not name:
            continue
        try:
            features.add(Feature(name))
        except ValueError as exc:
            raise RobovacConfigError(f"Unknown feature {name!r}; expected one of {sorted(Feature)}") from exc
    return frozenset(features)


@dataclasses.dataclass(frozen=True)
class DeviceModelConfig:
    """Per-model session configuration.

    Parameters
    ----------
    static_features : frozenset[Feature]
        Capabilities known to exist for the model before any status payload
        arrives.  They seed the capability registry and their setup routines
        run during :meth:`pyrobovac.device.VacuumDevice.setup_protocol_features`.
    state_root : str
        First segment of every state id (``<state_root>.<duid>.<folder>.<key>``).
    """

    static_features: frozenset[Feature] = frozenset()
    state_root: str = DEFAULT_STATE_ROOT

    def __post_init__(self) -> None:
        if not isinstance(self.static_features, frozenset):
            object.__setattr__(self, "static_features", _parse_features(self.static_features))
        if not self.state_root or not self.state_root.strip():
            raise RobovacConfigError("state_root must be non-empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> DeviceModelConfig:
        """Create configuration from environment variables.

        Reads ``ROBOVAC_STATIC_FEATURES`` (comma separated feature values,
        e.g. ``"map,consumables"``) and ``ROBOVAC_STATE_ROOT``.  Explicit
        keyword arguments override environment values.

        Raises
        ------
        RobovacConfigError
            If a feature name is not a known :class:`Feature`.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        features_env = env.get("ROBOVAC_STATIC_FEATURES")
        if features_env is not None and "static_features" not in overrides:
            config_kwargs["static_features"] = _parse_features(features_env)

        root_env = env.get("ROBOVAC_STATE_ROOT")
        if root_env is not None and "state_root" not in overrides:
            config_kwargs["state_root"] = root_env.strip()

        if "static_features" in overrides:
            overrides["static_features"] = _parse_features(overrides["static_features"])

        config_kwargs.update(overrides)
        return cls(**config_kwargs)

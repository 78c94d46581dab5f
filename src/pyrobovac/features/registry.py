"""Per-session capability registry.

The registry is the only place that decides whether a capability is on.
It is monotonic: capabilities are added, never removed, and each
capability's setup routine runs at most once per session.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable

from pyrobovac.features.capabilities import Feature

_logger = logging.getLogger(__name__)

SetupRoutine = Callable[[], Awaitable[None]]


class CapabilityRegistry:
    """Set of enabled capabilities plus their one-shot setup routines."""

    def __init__(self, seed: Iterable[Feature] = ()) -> None:
        self._enabled: set[Feature] = set(seed)
        self._setup: dict[Feature, SetupRoutine] = {}
        self._setup_started: set[Feature] = set()

    def register(self, feature: Feature, setup: SetupRoutine) -> None:
        """Attach the routine that provisions *feature* when it is enabled."""
        self._setup[feature] = setup

    def is_enabled(self, feature: Feature) -> bool:
        return feature in self._enabled

    @property
    def enabled(self) -> frozenset[Feature]:
        return frozenset(self._enabled)

    def __contains__(self, feature: object) -> bool:
        return feature in self._enabled

    def __len__(self) -> int:
        return len(self._enabled)

    async def enable(self, feature: Feature) -> bool:
        """Enable *feature*.

        Returns ``True`` only when this call moved the capability from
        disabled to enabled.  The capability is recorded before its setup
        routine is awaited, so an interleaved second call reports no change.
        A failing setup routine propagates; the capability stays enabled.
        """
        if feature in self._enabled:
            return False
        self._enabled.add(feature)
        _logger.debug("Enabling capability %s", feature.value)
        await self._run_setup(feature)
        return True

    async def run_pending_setup(self) -> None:
        """Run setup routines for capabilities enabled without one (seeded)."""
        for feature in sorted(self._enabled):
            await self._run_setup(feature)

    async def _run_setup(self, feature: Feature) -> None:
        setup = self._setup.get(feature)
        if setup is None or feature in self._setup_started:
            return
        self._setup_started.add(feature)
        await setup()

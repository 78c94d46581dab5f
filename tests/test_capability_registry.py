from __future__ import annotations

import asyncio

import pytest

from pyrobovac.features import CapabilityRegistry, Feature


@pytest.mark.asyncio
async def test_enable_reports_transition_once() -> None:
    registry = CapabilityRegistry()

    assert await registry.enable(Feature.MAP) is True
    assert await registry.enable(Feature.MAP) is False
    assert registry.is_enabled(Feature.MAP)
    assert Feature.MAP in registry


@pytest.mark.asyncio
async def test_seeded_capability_reports_no_change() -> None:
    registry = CapabilityRegistry([Feature.CONSUMABLES])

    assert await registry.enable(Feature.CONSUMABLES) is False
    assert registry.enabled == frozenset({Feature.CONSUMABLES})


@pytest.mark.asyncio
async def test_size_is_non_decreasing() -> None:
    registry = CapabilityRegistry()
    sequence = [Feature.MAP, Feature.MAP, Feature.MOP_WASH, Feature.CONSUMABLES, Feature.MOP_WASH, Feature.MAP]

    sizes = []
    for feature in sequence:
        await registry.enable(feature)
        sizes.append(len(registry))

    assert sizes == sorted(sizes)
    assert sizes[-1] == 3


@pytest.mark.asyncio
async def test_setup_runs_exactly_once() -> None:
    registry = CapabilityRegistry()
    runs: list[str] = []

    async def _setup() -> None:
        runs.append("mop_wash")

    registry.register(Feature.MOP_WASH, _setup)
    await registry.enable(Feature.MOP_WASH)
    await registry.enable(Feature.MOP_WASH)
    await registry.run_pending_setup()

    assert runs == ["mop_wash"]


@pytest.mark.asyncio
async def test_interleaved_enable_sees_capability_already_recorded() -> None:
    registry = CapabilityRegistry()
    runs: list[str] = []

    async def _slow_setup() -> None:
        await asyncio.sleep(0)
        runs.append("map")

    registry.register(Feature.MAP, _slow_setup)
    first, second = await asyncio.gather(registry.enable(Feature.MAP), registry.enable(Feature.MAP))

    assert (first, second) == (True, False)
    assert runs == ["map"]


@pytest.mark.asyncio
async def test_pending_setup_runs_for_seeded_capabilities() -> None:
    registry = CapabilityRegistry([Feature.AUTO_EMPTY_DOCK])
    runs: list[Feature] = []

    async def _setup() -> None:
        runs.append(Feature.AUTO_EMPTY_DOCK)

    registry.register(Feature.AUTO_EMPTY_DOCK, _setup)
    await registry.run_pending_setup()
    await registry.run_pending_setup()

    assert runs == [Feature.AUTO_EMPTY_DOCK]


@pytest.mark.asyncio
async def test_failing_setup_propagates_and_keeps_capability() -> None:
    registry = CapabilityRegistry()

    async def _broken() -> None:
        raise RuntimeError("store offline")

    registry.register(Feature.MOP_DRY, _broken)
    with pytest.raises(RuntimeError):
        await registry.enable(Feature.MOP_DRY)

    assert registry.is_enabled(Feature.MOP_DRY)
    assert await registry.enable(Feature.MOP_DRY) is False

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from pyrobovac.state import InMemoryStateStore, StateValue
from pyrobovac.state.declaration import boolean, infer_declaration, number, text
from pyrobovac.state.policy import should_write

FIXED = datetime(2024, 1, 1, tzinfo=UTC)


def test_should_write_policy() -> None:
    assert should_write(None, 1)
    assert should_write(StateValue(val=1, ack=True), 2)
    assert not should_write(StateValue(val=1, ack=True), 1)
    assert should_write(StateValue(val=1, ack=False), 1)


@pytest.mark.asyncio
async def test_set_if_changed_skips_identical_values() -> None:
    store = InMemoryStateStore(clock=lambda: FIXED)

    assert await store.set_if_changed("a.b", 1)
    assert not await store.set_if_changed("a.b", 1)
    assert await store.set_if_changed("a.b", 2)

    assert [(w.value, w.ack, w.observed_at) for w in store.journal] == [(1, True, FIXED), (2, True, FIXED)]


@pytest.mark.asyncio
async def test_acknowledged_write_is_unconditional() -> None:
    store = InMemoryStateStore()

    await store.set_acknowledged("a.b", 1)
    await store.set_acknowledged("a.b", 1)

    assert len(store.writes_for("a.b")) == 2


@pytest.mark.asyncio
async def test_pending_user_edit_is_replaced() -> None:
    store = InMemoryStateStore()
    await store.set_if_changed("a.b", 1)
    store.set_user_value("a.b", 1)

    assert await store.set_if_changed("a.b", 1)
    assert store.get_state("a.b").ack is True


@pytest.mark.asyncio
async def test_ensure_replaces_changed_declaration() -> None:
    store = InMemoryStateStore()

    await store.ensure("a.b", number(name="One"))
    await store.ensure("a.b", number(name="One"))
    await store.ensure("a.b", number(name="Two"))

    assert store.get_declaration("a.b").name == "Two"
    assert store.journal == []


@pytest.mark.asyncio
async def test_stored_values_are_isolated_from_callers() -> None:
    store = InMemoryStateStore()
    value = {"rooms": [1]}

    await store.set_acknowledged("a.b", value)
    value["rooms"].append(2)

    assert store.get_value("a.b") == {"rooms": [1]}
    assert store.snapshot("a.") == {"a.b": {"rooms": [1]}}
    assert store.snapshot("z.") == {}


def test_infer_declaration() -> None:
    assert infer_declaration(True) == boolean(role="indicator")
    assert infer_declaration(3.5).type == "number"
    assert infer_declaration("x") == text()
    assert infer_declaration([1]).type == "json"
    assert number().with_name("n").name == "n"
    assert number(name="keep").with_name("n").name == "keep"

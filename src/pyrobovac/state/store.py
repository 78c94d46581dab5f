"""State store interface and a deterministic in-memory implementation.

The device session only ever talks to a :class:`StateStore`.  Production
deployments provide an adapter to their home-automation state tree; the
in-memory store is used by the test-suite and the replay tooling.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, Protocol

from pyrobovac.state.declaration import StateDeclaration
from pyrobovac.state.events import StateValue, StateWrite
from pyrobovac.state.policy import should_write


def _utcnow() -> datetime:
    return datetime.now(UTC)


class StateStore(Protocol):
    """Structural interface of the persisted state tree."""

    async def ensure(self, state_id: str, declaration: StateDeclaration) -> None:
        """Create or update a state definition (idempotent)."""
        ...

    async def set_if_changed(self, state_id: str, value: Any) -> bool:
        """Persist an acknowledged value only if it differs; return whether it was written."""
        ...

    async def set_acknowledged(self, state_id: str, value: Any) -> None:
        """Persist an acknowledged value unconditionally."""
        ...


class InMemoryStateStore:
    """In-memory state tree.

    Every write is appended to :attr:`journal` so callers can inspect the
    exact sequence of writes, not only the final values.
    """

    def __init__(self, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock
        self._declarations: dict[str, StateDeclaration] = {}
        self._values: dict[str, StateValue] = {}
        self.journal: list[StateWrite] = []

    async def ensure(self, state_id: str, declaration: StateDeclaration) -> None:
        if self._declarations.get(state_id) == declaration:
            return
        self._declarations[state_id] = declaration

    async def set_if_changed(self, state_id: str, value: Any) -> bool:
        if not should_write(self._values.get(state_id), value):
            return False
        self._write(state_id, value, ack=True)
        return True

    async def set_acknowledged(self, state_id: str, value: Any) -> None:
        self._write(state_id, value, ack=True)

    def set_user_value(self, state_id: str, value: Any) -> None:
        """Record an unacknowledged edit, as a user interface would."""
        self._write(state_id, value, ack=False)

    def _write(self, state_id: str, value: Any, *, ack: bool) -> None:
        now = self._clock()
        stored = copy.deepcopy(value)
        self._values[state_id] = StateValue(val=stored, ack=ack, ts=now)
        self.journal.append(StateWrite(state_id=state_id, value=stored, ack=ack, observed_at=now))

    def get_value(self, state_id: str) -> Any:
        current = self._values.get(state_id)
        return None if current is None else copy.deepcopy(current.val)

    def get_state(self, state_id: str) -> StateValue | None:
        return self._values.get(state_id)

    def get_declaration(self, state_id: str) -> StateDeclaration | None:
        return self._declarations.get(state_id)

    def has_state(self, state_id: str) -> bool:
        return state_id in self._declarations

    def writes_for(self, state_id: str) -> list[StateWrite]:
        return [write for write in self.journal if write.state_id == state_id]

    def snapshot(self, prefix: str = "") -> dict[str, Any]:
        """Current values, optionally limited to ids starting with *prefix*."""
        return {
            state_id: copy.deepcopy(current.val)
            for state_id, current in sorted(self._values.items())
            if state_id.startswith(prefix)
        }

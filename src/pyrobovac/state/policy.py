"""Write policy for acknowledged state updates.

This module intentionally contains *no* payload parsing; callers hand in
values that are already in their persisted form.
"""

from __future__ import annotations

from typing import Any

from pyrobovac.state.events import StateValue


def should_write(previous: StateValue | None, value: Any) -> bool:
    """Decide whether an acknowledged write of *value* is a change.

    Policy:
    - No previous value: write.
    - Previous value differs: write.
    - Previous value is an unacknowledged (pending UI) edit: write, so the
      device-reported value replaces it.
    """
    if previous is None:
        return True
    if not previous.ack:
        return True
    return bool(previous.val != value)

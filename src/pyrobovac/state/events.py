"""Journal records emitted by state stores."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StateValue(BaseModel):
    """Current value of a state together with its acknowledgement flag.

    ``ack=True`` means the value was reported by the device; ``ack=False``
    marks a pending edit coming from a user interface.
    """

    model_config = ConfigDict(frozen=True)

    val: Any
    ack: bool
    ts: datetime = Field(default_factory=lambda: datetime.now(UTC))


class StateWrite(BaseModel):
    """A single write that reached the store."""

    model_config = ConfigDict(frozen=True)

    state_id: str = Field(..., description="Fully qualified state id")
    value: Any
    ack: bool = True
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("state_id")
    @classmethod
    def _normalize_state_id(cls, value: str) -> str:
        state_id = value.strip()
        if not state_id:
            raise ValueError("state_id must be non-empty")
        return state_id

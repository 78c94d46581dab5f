"""Base model and enum for pyrobovac data models.

Models inherit from :class:`RobovacBaseModel` which accepts both the
protocol's camelCase keys and snake_case field names.

Status enums inherit from :class:`RobovacEnum` whose ``_missing_`` hook
returns ``UNKNOWN`` for any value without a mapped member.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RobovacEnum(enum.IntEnum):
    """Base for protocol status enums.

    Every subclass **must** define an ``UNKNOWN`` member.
    """

    @classmethod
    def _missing_(cls, value: object) -> RobovacEnum:
        if hasattr(cls, "UNKNOWN"):
            unknown: RobovacEnum = cls.UNKNOWN  # type: ignore[attr-defined]
            return unknown
        return next(iter(cls))


class RobovacBaseModel(BaseModel):
    """Base for pyrobovac models.

    * camelCase → snake_case via ``alias_generator=to_camel``
    * unknown keys are rejected so typos in hand-written profiles surface
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

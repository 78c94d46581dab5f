"""State declarations passed to the state store."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

StateType = Literal["number", "string", "boolean", "json"]


class StateDeclaration(BaseModel):
    """Shape of a state in the tree.

    Declarations are compared by value: ensuring the same declaration twice
    is a no-op for any conforming store.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: StateType
    role: str = "value"
    name: str | None = None
    states: dict[int | str, str] | None = None
    """Allowed values (code -> display label)."""
    readable: bool = True
    writable: bool = False
    unit: str | None = None
    min: float | None = None
    max: float | None = None
    default: Any = None

    def with_name(self, name: str) -> StateDeclaration:
        """Return a copy carrying *name* unless one is already set."""
        if self.name:
            return self
        return self.model_copy(update={"name": name})


def number(**kwargs: Any) -> StateDeclaration:
    return StateDeclaration(type="number", **kwargs)


def boolean(**kwargs: Any) -> StateDeclaration:
    return StateDeclaration(type="boolean", **kwargs)


def text(**kwargs: Any) -> StateDeclaration:
    return StateDeclaration(type="string", **kwargs)


def json_value(**kwargs: Any) -> StateDeclaration:
    return StateDeclaration(type="json", **kwargs)


def button(name: str) -> StateDeclaration:
    """Writable push-button command."""
    return StateDeclaration(type="boolean", role="button", name=name, writable=True, default=False)


def infer_declaration(value: Any, *, name: str | None = None) -> StateDeclaration:
    """Best-effort declaration for a value without a known common definition."""
    if isinstance(value, bool):
        return boolean(role="indicator", name=name)
    if isinstance(value, (int, float)):
        return number(name=name)
    if isinstance(value, str):
        return text(name=name)
    return json_value(role="json", name=name)

"""Custom exception hierarchy for pyrobovac."""

from __future__ import annotations


class RobovacError(Exception):
    """Base exception for all pyrobovac errors."""


class RobovacConfigError(RobovacError):
    """Invalid or missing configuration."""


class RobovacProtocolError(RobovacError):
    """A collaborator returned a payload of an unexpected shape.

    Raised when the transport hands back something that cannot be a status
    snapshot (for example a bare string instead of a mapping).  Malformed
    *values* inside a well-formed payload are tolerated and never raise.
    """

    def __init__(self, message: str, *, operation: str = "") -> None:
        self.operation = operation
        super().__init__(message)

"""Masking of home-network identifiers in debug logs.

A robot's network info (and occasionally its status) carries the SSID,
BSSID, MAC and IP address of the user's network, sometimes a device token
as well.  Payloads pass through :func:`redact_for_log` before they are
logged.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

REDACTED = "<redacted>"
MAX_LOGGED_STRING = 256

_SENSITIVE_KEYS: frozenset[str] = frozenset(
    {"ssid", "bssid", "mac", "ip", "token", "localkey", "local_key", "password"}
)


def redact_for_log(value: Any) -> Any:
    """Return a copy of *value* with sensitive mapping entries masked.

    Mappings and lists are walked recursively; long strings are cut to
    :data:`MAX_LOGGED_STRING` characters.  The input is never modified.
    """
    if isinstance(value, Mapping):
        return {
            str(key): REDACTED if str(key).lower() in _SENSITIVE_KEYS else redact_for_log(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact_for_log(item) for item in value]
    if isinstance(value, str) and len(value) > MAX_LOGGED_STRING:
        return f"{value[:MAX_LOGGED_STRING]}...<{len(value) - MAX_LOGGED_STRING} more>"
    return value

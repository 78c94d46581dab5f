"""Fan-out/fan-in helper for logically concurrent steps.

:func:`run_batch` starts every awaitable before awaiting any of them and
joins them all.  The first failure propagates to the caller.  Siblings are
*not* cancelled and nothing they already wrote is undone: a rejected batch
means "some of the work may already be persisted".
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Iterable
from typing import Any, TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")


def _log_late_failure(label: str) -> Any:
    def _callback(task: asyncio.Future[Any]) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _logger.debug("%s: task failed: %r", label, exc)

    return _callback


async def run_batch(label: str, aws: Iterable[Awaitable[T]]) -> list[T]:
    """Run *aws* concurrently and return their results in order."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    if not tasks:
        return []
    for task in tasks:
        # Retrieves every exception so failures after the first are logged, not reported as unhandled.
        task.add_done_callback(_log_late_failure(label))
    try:
        return list(await asyncio.gather(*tasks))
    except Exception:
        pending = sum(1 for task in tasks if not task.done())
        _logger.debug("%s batch failed with %d task(s) still running", label, pending)
        raise

"""Timer scheduling used by the timing decorators.

Durations at this boundary are milliseconds. The default scheduler runs
timers on an asyncio event loop via ``loop.call_later``; anything with the
same two methods (``now`` and ``call_later``) can replace it.
"""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING
from typing import Protocol

from mono_event.errors import SchedulerError

if TYPE_CHECKING:
    from collections.abc import Callable


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Clock plus one-shot timers, both in milliseconds."""

    def now(self) -> float: ...

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle: ...


class LoopScheduler:
    """Schedule timers on an asyncio event loop.

    With no explicit ``loop`` the running loop is looked up for every timer,
    so one scheduler can serve callbacks invoked from any coroutine.

    Raises:
        SchedulerError: If no loop is running or the target loop is closed.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def _resolve_loop(self, delay_ms: float | None = None) -> asyncio.AbstractEventLoop:
        loop = self._loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as e:
                raise SchedulerError(
                    "No running event loop to schedule a timer on",
                    delay_ms=delay_ms,
                    cause=e,
                ) from e
        if loop.is_closed():
            raise SchedulerError("Target event loop is closed", delay_ms=delay_ms)
        return loop

    def now(self) -> float:
        # Only timers need a loop; asyncio's default clock is time.monotonic.
        if self._loop is not None:
            return self._loop.time() * 1000.0
        return time.monotonic() * 1000.0

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self._resolve_loop(delay_ms).call_later(delay_ms / 1000.0, callback)

"""Debounce and throttle wrappers.

Both wrap any callable and collapse bursts of calls into fewer calls. They
know nothing about events; wrapping a listener before registering it is the
usual way to combine them::

    event.add(mono_debounce(on_resize, 200))

``wait`` is in milliseconds. Errors raised by the wrapped callable from a
timer are not caught here; they reach the event loop's exception handler.
"""

from __future__ import annotations

import functools
from abc import ABC
from abc import abstractmethod
from typing import TYPE_CHECKING
from typing import Any

from mono_event.utils.scheduling import LoopScheduler

if TYPE_CHECKING:
    from collections.abc import Callable

    from mono_event.utils.scheduling import Scheduler
    from mono_event.utils.scheduling import TimerHandle


class _TimedWrapper(ABC):
    """State shared by both wrappers: one timer slot and the latest arguments."""

    def __init__(self, func: Callable[..., Any], wait: float, scheduler: Scheduler | None) -> None:
        if not callable(func):
            raise TypeError(f"func must be callable, got {type(func).__name__}")
        functools.update_wrapper(self, func)
        self._func = func
        self.wait = wait
        self._scheduler: Scheduler = scheduler if scheduler is not None else LoopScheduler()
        self._handle: TimerHandle | None = None
        self._latest: tuple[tuple[Any, ...], dict[str, Any]] | None = None

    @property
    def pending(self) -> bool:
        """Whether a delayed call is waiting to run."""
        return self._handle is not None

    def cancel(self) -> None:
        """Drop the pending delayed call, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._latest = None

    def flush(self) -> None:
        """Run the pending delayed call now instead of when its timer fires."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._fire()

    def _clear_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _run_latest(self) -> None:
        latest, self._latest = self._latest, None
        if latest is not None:
            args, kwargs = latest
            self._func(*args, **kwargs)

    @abstractmethod
    def _fire(self) -> None:
        """Run the delayed call when its timer expires."""


class Debounced(_TimedWrapper):
    """Trailing-edge debounce: runs once ``wait`` ms after the last call."""

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self._clear_timer()
        if self.wait <= 0:
            self._func(*args, **kwargs)
            return

        self._latest = (args, kwargs)
        self._handle = self._scheduler.call_later(self.wait, self._fire)

    def _fire(self) -> None:
        self._handle = None
        self._run_latest()


class Throttled(_TimedWrapper):
    """Leading and trailing throttle: at most one call per ``wait`` ms window."""

    def __init__(self, func: Callable[..., Any], wait: float, scheduler: Scheduler | None) -> None:
        super().__init__(func, wait, scheduler)
        self._last_call_time: float | None = None
        self._trailing_scheduled = False

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        if self.wait <= 0:
            self._func(*args, **kwargs)
            return

        now = self._scheduler.now()
        remaining = None if self._last_call_time is None else self.wait - (now - self._last_call_time)

        if remaining is None or remaining <= 0 or remaining > self.wait:
            self._clear_timer()
            self._last_call_time = now
            self._trailing_scheduled = False
            self._latest = None
            self._func(*args, **kwargs)
        elif self._handle is None and not self._trailing_scheduled:
            self._handle = self._scheduler.call_later(remaining, self._fire)
            self._latest = (args, kwargs)
            self._trailing_scheduled = True
        else:
            # The scheduled trailing call picks up the newest arguments.
            self._latest = (args, kwargs)

    def cancel(self) -> None:
        super().cancel()
        self._trailing_scheduled = False

    def _fire(self) -> None:
        self._last_call_time = self._scheduler.now()
        self._handle = None
        self._trailing_scheduled = False
        self._run_latest()


def mono_debounce(
    func: Callable[..., Any],
    wait: float,
    *,
    scheduler: Scheduler | None = None,
) -> Debounced:
    """Delay ``func`` until ``wait`` ms pass without another call.

    Only the last call's arguments are used. ``wait <= 0`` calls straight
    through, synchronously.
    """
    return Debounced(func, wait, scheduler)


def mono_throttle(
    func: Callable[..., Any],
    wait: float,
    *,
    scheduler: Scheduler | None = None,
) -> Throttled:
    """Call ``func`` at most once per ``wait`` ms (leading and trailing edge).

    The first call of a burst runs immediately; one trailing call at the end
    of the window runs with the most recent arguments. ``wait <= 0`` calls
    straight through every time.
    """
    return Throttled(func, wait, scheduler)

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Callable

# Expose names for import convenience in tests
__all__ = ["AsyncCallRecorder", "ManualScheduler", "ManualTimerHandle"]


@dataclass
class ManualTimerHandle:
    when: float
    callback: Callable[[], None] = field(repr=False)
    seq: int = 0
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Fake clock for timer tests; time only moves when ``advance`` is called."""

    def __init__(self, start: float = 0.0) -> None:
        self.current = start
        self._timers: list[ManualTimerHandle] = []
        self._seq = 0

    def now(self) -> float:
        return self.current

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ManualTimerHandle:
        self._seq += 1
        handle = ManualTimerHandle(self.current + delay_ms, callback, self._seq)
        self._timers.append(handle)
        return handle

    def advance(self, ms: float) -> None:
        """Move the clock forward, firing due timers in order."""
        target = self.current + ms
        while True:
            due = [t for t in self._timers if not t.cancelled and t.when <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.when, t.seq))
            self._timers.remove(timer)
            self.current = timer.when
            timer.callback()
        self.current = target

    @property
    def pending(self) -> list[ManualTimerHandle]:
        return [t for t in self._timers if not t.cancelled]


class AsyncCallRecorder:
    """Async callable that records its calls and optionally fails."""

    def __init__(self, side_effect: Any = None, return_value: Any = None):
        self.calls: list[tuple[tuple, dict]] = []
        self.side_effect = side_effect
        self.return_value = return_value

    async def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))

        if isinstance(self.side_effect, Exception):
            raise self.side_effect
        if callable(self.side_effect):
            return self.side_effect(*args, **kwargs)
        return self.return_value

    def assert_called_once_with(self, *args, **kwargs):
        assert len(self.calls) == 1, f"expected 1 call, got {len(self.calls)}"
        assert self.calls[0] == (args, kwargs)

    def assert_not_called(self):
        assert not self.calls

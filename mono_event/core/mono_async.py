"""Asynchronous single-event implementation."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import TypeVar

from mono_event.config import EmitterOptions
from mono_event.config import get_config
from mono_event.core.dispatch import emit_parallel
from mono_event.core.dispatch import emit_sequential
from mono_event.core.dispatch import emit_settled
from mono_event.core.listenable import Listenable

if TYPE_CHECKING:
    from mono_event.core.dispatch import ListenerOutcome
    from mono_event.core.registry import ListenerRegistry

T = TypeVar("T")


class AsyncEmission:
    """Async emission operations over a registry and fixed options.

    Shared by :class:`MonoAsyncEvent` and the restricted async emitter.
    """

    _registry: ListenerRegistry
    _options: EmitterOptions

    @property
    def options(self) -> EmitterOptions:
        return self._options

    @property
    def parallel(self) -> bool:
        return self._options.parallel

    async def emit(self, value: T) -> None:
        """Deliver ``value`` in the configured mode and wait for completion.

        In parallel mode a failure propagates as soon as it happens; other
        listeners that were already started are not cancelled.
        """
        if self._options.parallel:
            await emit_parallel(self._registry, value, self._options)
        else:
            await emit_sequential(self._registry, value, self._options)

    async def emit_sequential(self, value: T) -> None:
        """Run one pass sequentially regardless of the ``parallel`` option."""
        await emit_sequential(self._registry, value, self._options)

    async def emit_parallel(self, value: T) -> None:
        """Run one pass in parallel regardless of the ``parallel`` option."""
        await emit_parallel(self._registry, value, self._options)

    async def emit_settled(self, value: T) -> list[ListenerOutcome[T]]:
        """Run a pass that never short-circuits and return every outcome."""
        return await emit_settled(
            self._registry, value, self._options, parallel=self._options.parallel
        )


class MonoAsyncEvent(AsyncEmission, Listenable[T]):
    """An event whose listeners may be coroutines; ``emit`` is awaitable."""

    def __init__(self, options: EmitterOptions | None = None) -> None:
        Listenable.__init__(self)
        self._options = options or EmitterOptions()

    def __repr__(self) -> str:
        mode = "parallel" if self._options.parallel else "sequential"
        return f"<MonoAsyncEvent {mode} listeners={len(self._registry)}>"


def mono_async(
    *,
    parallel: bool | None = None,
    continue_on_error: bool | None = None,
    log_errors: bool | None = None,
) -> MonoAsyncEvent:
    """Create an asynchronous event.

    Options left as ``None`` fall back to the process-wide defaults.
    """
    options = get_config().resolve(
        parallel=parallel,
        continue_on_error=continue_on_error,
        log_errors=log_errors,
    )
    return MonoAsyncEvent(options)

"""Emission algorithms shared by events and restricted emitters.

Every pass works on snapshots taken at its start, one of the persistent
listeners and one of the once listeners. Listeners added during the pass
wait for the next one. A persistent listener in the snapshot is invoked even
if it is removed while the pass is in progress. Before the once phase runs,
the snapshotted once listeners are removed from live storage by identity;
only those still registered at that point are invoked, so a once listener
never runs twice even across reentrant passes.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import inspect
import logging
from typing import TYPE_CHECKING
from typing import Any
from typing import Generic
from typing import TypeVar

from mono_event.errors import default_error_handler

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mono_event.config import EmitterOptions
    from mono_event.core.registry import Listener
    from mono_event.core.registry import ListenerRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ListenerOutcome(Generic[T]):
    """Result of one listener invocation in a settled pass."""

    listener: Listener[T]
    result: Any = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def report_listener_error(error: Exception, listener: Listener[Any], options: EmitterOptions) -> None:
    """Send a listener failure to the diagnostic sink when logging is enabled."""
    if not options.log_errors:
        return
    default_error_handler.handle_error(
        error,
        log_level=options.error_log_level,
        context={"listener": listener.name, "once": listener.once},
    )


def _invoke_sync(listener: Listener[T], value: T, options: EmitterOptions) -> None:
    try:
        result = listener.invoke(value)
    except Exception as error:
        report_listener_error(error, listener, options)
        if not options.continue_on_error:
            raise
        return

    if inspect.iscoroutine(result):
        result.close()
        logger.warning(
            "Listener %s returned a coroutine on a synchronous event; it was not awaited",
            listener.name,
        )


def emit_sync(registry: ListenerRegistry[T], value: T, options: EmitterOptions) -> None:
    """Deliver ``value`` to every listener on the caller's stack."""
    if not registry:
        return

    persistent, once = registry.snapshot(), registry.snapshot_once()
    for listener in persistent:
        _invoke_sync(listener, value, options)

    if once:
        for listener in registry.claim_once(once):
            _invoke_sync(listener, value, options)


async def _invoke_async(listener: Listener[T], value: T, options: EmitterOptions) -> None:
    try:
        result = listener.invoke(value)
        if inspect.isawaitable(result):
            await result
    except Exception as error:
        report_listener_error(error, listener, options)
        if not options.continue_on_error:
            raise


async def emit_sequential(registry: ListenerRegistry[T], value: T, options: EmitterOptions) -> None:
    """Invoke and await listeners one at a time, in registration order."""
    if not registry:
        return

    persistent, once = registry.snapshot(), registry.snapshot_once()
    for listener in persistent:
        await _invoke_async(listener, value, options)

    if once:
        for listener in registry.claim_once(once):
            await _invoke_async(listener, value, options)


async def _gather(listeners: Iterable[Listener[T]], value: T, options: EmitterOptions) -> None:
    # The first failure propagates; the remaining tasks keep running.
    pending = [_invoke_async(listener, value, options) for listener in listeners]
    if pending:
        await asyncio.gather(*pending)


async def emit_parallel(registry: ListenerRegistry[T], value: T, options: EmitterOptions) -> None:
    """Start every listener, then await them jointly (persistent batch, then once batch)."""
    if not registry:
        return

    persistent, once = registry.snapshot(), registry.snapshot_once()
    await _gather(persistent, value, options)

    if once:
        await _gather(registry.claim_once(once), value, options)


async def _settle(listener: Listener[T], value: T, options: EmitterOptions) -> ListenerOutcome[T]:
    try:
        result = listener.invoke(value)
        if inspect.isawaitable(result):
            result = await result
    except Exception as error:
        report_listener_error(error, listener, options)
        return ListenerOutcome(listener, error=error)
    return ListenerOutcome(listener, result=result)


async def emit_settled(
    registry: ListenerRegistry[T],
    value: T,
    options: EmitterOptions,
    *,
    parallel: bool,
) -> list[ListenerOutcome[T]]:
    """Run a full pass without short-circuiting and report every outcome.

    Outcomes are returned in snapshot order, persistent listeners first.
    """
    outcomes: list[ListenerOutcome[T]] = []
    if not registry:
        return outcomes

    async def run_batch(batch: tuple[Listener[T], ...]) -> None:
        if parallel:
            outcomes.extend(await asyncio.gather(*(_settle(listener, value, options) for listener in batch)))
        else:
            for listener in batch:
                outcomes.append(await _settle(listener, value, options))

    persistent, once = registry.snapshot(), registry.snapshot_once()
    await run_batch(persistent)
    if once:
        await run_batch(registry.claim_once(once))
    return outcomes

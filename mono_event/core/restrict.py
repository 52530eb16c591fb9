"""Restricted events: registration and emission as separate handles.

``mono_restrict`` returns a listen handle that can only register listeners
and an emit handle that can only fire. Handing out the listen handle never
hands out the ability to emit.

Example::

    event, emit = mono_restrict()
    event.add(print)
    emit("hello")
"""

from __future__ import annotations

from typing import NamedTuple
from typing import TypeVar

from mono_event.config import EmitterOptions
from mono_event.config import get_config
from mono_event.core.dispatch import emit_sync
from mono_event.core.listenable import Listenable
from mono_event.core.mono_async import AsyncEmission
from mono_event.core.registry import ListenerRegistry

T = TypeVar("T")


class RestrictedEvent(Listenable[T]):
    """Listen handle: ``add``, ``remove`` and ``remove_all`` only."""

    def __repr__(self) -> str:
        return f"<RestrictedEvent listeners={len(self._registry)}>"


class RestrictedEmitter:
    """Emit handle for a synchronous restricted event."""

    def __init__(self, registry: ListenerRegistry, options: EmitterOptions) -> None:
        self._registry = registry
        self._options = options

    @property
    def options(self) -> EmitterOptions:
        return self._options

    def emit(self, value: T) -> None:
        emit_sync(self._registry, value, self._options)

    def __call__(self, value: T) -> None:
        self.emit(value)


class RestrictedAsyncEmitter(AsyncEmission):
    """Emit handle for an asynchronous restricted event."""

    def __init__(self, registry: ListenerRegistry, options: EmitterOptions) -> None:
        self._registry = registry
        self._options = options

    async def __call__(self, value: T) -> None:
        await self.emit(value)


class RestrictedPair(NamedTuple):
    event: RestrictedEvent
    emit: RestrictedEmitter


class RestrictedAsyncPair(NamedTuple):
    event: RestrictedEvent
    emit: RestrictedAsyncEmitter


def mono_restrict(
    *,
    continue_on_error: bool | None = None,
    log_errors: bool | None = None,
) -> RestrictedPair:
    """Create a synchronous event split into ``(event, emit)`` handles."""
    options = get_config().resolve(
        continue_on_error=continue_on_error,
        log_errors=log_errors,
        parallel=False,
    )
    registry: ListenerRegistry = ListenerRegistry()
    return RestrictedPair(RestrictedEvent(registry), RestrictedEmitter(registry, options))


def mono_restrict_async(
    *,
    parallel: bool | None = None,
    continue_on_error: bool | None = None,
    log_errors: bool | None = None,
) -> RestrictedAsyncPair:
    """Create an asynchronous event split into ``(event, emit)`` handles."""
    options = get_config().resolve(
        parallel=parallel,
        continue_on_error=continue_on_error,
        log_errors=log_errors,
    )
    registry: ListenerRegistry = ListenerRegistry()
    return RestrictedAsyncPair(RestrictedEvent(registry), RestrictedAsyncEmitter(registry, options))

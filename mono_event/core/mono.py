"""Synchronous single-event implementation."""

from __future__ import annotations

from typing import TypeVar

from mono_event.config import EmitterOptions
from mono_event.config import get_config
from mono_event.core.dispatch import emit_sync
from mono_event.core.listenable import Listenable

T = TypeVar("T")


class MonoEvent(Listenable[T]):
    """An event whose ``emit`` runs every listener before returning.

    By default the first listener error stops the pass and propagates to
    the ``emit`` caller. With ``continue_on_error`` the error is dropped
    (after logging, when ``log_errors`` is set) and the pass continues.
    """

    def __init__(self, options: EmitterOptions | None = None) -> None:
        super().__init__()
        self._options = options or EmitterOptions()

    @property
    def options(self) -> EmitterOptions:
        return self._options

    def emit(self, value: T) -> None:
        emit_sync(self._registry, value, self._options)

    def __repr__(self) -> str:
        return f"<MonoEvent listeners={len(self._registry)}>"


def mono(
    *,
    continue_on_error: bool | None = None,
    log_errors: bool | None = None,
) -> MonoEvent:
    """Create a synchronous event.

    Options left as ``None`` fall back to the process-wide defaults
    (see :func:`mono_event.config.get_config`).
    """
    options = get_config().resolve(
        continue_on_error=continue_on_error,
        log_errors=log_errors,
        parallel=False,
    )
    return MonoEvent(options)

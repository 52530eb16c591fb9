"""Listener registry and dispatch engine."""

from mono_event.core.dispatch import ListenerOutcome
from mono_event.core.mono import MonoEvent
from mono_event.core.mono import mono
from mono_event.core.mono_async import MonoAsyncEvent
from mono_event.core.mono_async import mono_async
from mono_event.core.registry import Listener
from mono_event.core.registry import ListenerRegistry
from mono_event.core.restrict import RestrictedAsyncEmitter
from mono_event.core.restrict import RestrictedAsyncPair
from mono_event.core.restrict import RestrictedEmitter
from mono_event.core.restrict import RestrictedEvent
from mono_event.core.restrict import RestrictedPair
from mono_event.core.restrict import mono_restrict
from mono_event.core.restrict import mono_restrict_async

__all__ = [
    "Listener",
    "ListenerOutcome",
    "ListenerRegistry",
    "MonoAsyncEvent",
    "MonoEvent",
    "RestrictedAsyncEmitter",
    "RestrictedAsyncPair",
    "RestrictedEmitter",
    "RestrictedEvent",
    "RestrictedPair",
    "mono",
    "mono_async",
    "mono_restrict",
    "mono_restrict_async",
]

"""mono_event - single-event notification primitives.

One event, many listeners: synchronous and asynchronous events, restricted
events that separate registration from emission, and debounce/throttle
wrappers for listener callbacks.
"""

from mono_event.core import ListenerOutcome
from mono_event.core import MonoAsyncEvent
from mono_event.core import MonoEvent
from mono_event.core import RestrictedAsyncEmitter
from mono_event.core import RestrictedEmitter
from mono_event.core import RestrictedEvent
from mono_event.core import mono
from mono_event.core import mono_async
from mono_event.core import mono_restrict
from mono_event.core import mono_restrict_async
from mono_event.utils import mono_debounce
from mono_event.utils import mono_throttle

__all__ = [
    "ListenerOutcome",
    "MonoAsyncEvent",
    "MonoEvent",
    "RestrictedAsyncEmitter",
    "RestrictedEmitter",
    "RestrictedEvent",
    "__version__",
    "mono",
    "mono_async",
    "mono_debounce",
    "mono_restrict",
    "mono_restrict_async",
    "mono_throttle",
]
__version__ = "0.3.0"

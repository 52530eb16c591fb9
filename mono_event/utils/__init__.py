"""Helpers that do not depend on the event registry."""

from mono_event.utils.decorators import Debounced
from mono_event.utils.decorators import Throttled
from mono_event.utils.decorators import mono_debounce
from mono_event.utils.decorators import mono_throttle
from mono_event.utils.scheduling import LoopScheduler
from mono_event.utils.scheduling import Scheduler

__all__ = [
    "Debounced",
    "LoopScheduler",
    "Scheduler",
    "Throttled",
    "mono_debounce",
    "mono_throttle",
]

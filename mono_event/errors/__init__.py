"""Error handling for mono_event."""

from mono_event.errors.error_patterns import async_handle_listener_errors
from mono_event.errors.error_patterns import handle_listener_errors
from mono_event.errors.mono_errors import ConfigurationError
from mono_event.errors.mono_errors import ErrorHandler
from mono_event.errors.mono_errors import ListenerError
from mono_event.errors.mono_errors import MonoEventError
from mono_event.errors.mono_errors import SchedulerError
from mono_event.errors.mono_errors import default_error_handler
from mono_event.errors.mono_errors import handle_error

__all__ = [
    "ConfigurationError",
    "ErrorHandler",
    "ListenerError",
    "MonoEventError",
    "SchedulerError",
    "async_handle_listener_errors",
    "default_error_handler",
    "handle_error",
    "handle_listener_errors",
]

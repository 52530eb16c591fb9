"""Error containment decorators for listener callbacks.

Events propagate listener failures to the ``emit`` caller, and the timing
decorators let them escape into the event loop. These decorators give a
callback its own containment: failures are logged and, unless ``reraise``
is set, swallowed.
"""

from __future__ import annotations

from functools import wraps
import logging
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    from collections.abc import Awaitable
    from collections.abc import Callable

from mono_event.errors.mono_errors import ListenerError
from mono_event.errors.mono_errors import MonoEventError

logger = logging.getLogger(__name__)


def _wrap_listener_exception(e: Exception, *, operation: str) -> MonoEventError:
    if isinstance(e, MonoEventError):
        return e
    return ListenerError(
        f"Error in listener {operation}: {e!s}",
        listener=operation,
        cause=e,
    )


def _handle_listener_exception(
    e: Exception,
    *,
    operation: str,
    reraise: bool,
    log_level: int,
) -> None:
    wrapped_error = _wrap_listener_exception(e, operation=operation)
    logger.log(log_level, str(wrapped_error), exc_info=True)

    if reraise:
        if wrapped_error is e:
            raise e
        raise wrapped_error from e


def handle_listener_errors(
    operation: str | None = None,
    *,
    reraise: bool = False,
    log_level: int = logging.ERROR,
) -> Callable:
    """Decorator that contains errors raised by a synchronous callback.

    Args:
        operation: Name used in log messages, defaults to the function name
        reraise: Re-raise as ``ListenerError`` instead of swallowing
        log_level: Logging level for caught exceptions

    Returns:
        Decorated function
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                _handle_listener_exception(
                    e,
                    operation=operation or func.__name__,
                    reraise=reraise,
                    log_level=log_level,
                )
                return None

        return wrapper

    return decorator


def async_handle_listener_errors(
    operation: str | None = None,
    *,
    reraise: bool = False,
    log_level: int = logging.ERROR,
) -> Callable:
    """Async counterpart of :func:`handle_listener_errors`."""

    def decorator(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                _handle_listener_exception(
                    e,
                    operation=operation or func.__name__,
                    reraise=reraise,
                    log_level=log_level,
                )
                return None

        return wrapper

    return decorator

"""Centralized error handling for mono_event.

This module provides the exception hierarchy raised by the package itself
(listener failures propagate unchanged) and the ``ErrorHandler`` used as the
diagnostic sink when an event is created with ``log_errors=True``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class MonoEventError(Exception):
    """Base exception for all mono_event errors.

    All package-specific exceptions inherit from this class so callers can
    catch them in one place.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a plain dictionary."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause!s})"
        return self.message


class ConfigurationError(MonoEventError):
    """Raised when emitter options or process defaults are invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, error_code="ConfigurationError", details=details, **kwargs)
        self.config_key = config_key


class SchedulerError(MonoEventError):
    """Raised when a timer cannot be scheduled."""

    def __init__(
        self,
        message: str,
        *,
        delay_ms: float | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if delay_ms is not None:
            details["delay_ms"] = delay_ms
        super().__init__(message, error_code="SchedulerError", details=details, **kwargs)
        self.delay_ms = delay_ms


class ListenerError(MonoEventError):
    """Wraps an exception raised by a listener callback."""

    def __init__(
        self,
        message: str,
        *,
        listener: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if listener:
            details["listener"] = listener
        super().__init__(message, error_code="ListenerError", details=details, **kwargs)
        self.listener = listener


class ErrorHandler:
    """Centralized error reporting."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self._error_handlers: dict[type[BaseException], Callable[[BaseException], Any]] = {}

    def register_handler(
        self,
        exception_type: type[BaseException],
        handler: Callable[[BaseException], Any],
    ) -> None:
        """Register a custom error handler for an exception type."""
        self._error_handlers[exception_type] = handler

    def unregister_handler(self, exception_type: type[BaseException]) -> bool:
        """Drop the custom handler for ``exception_type`` if one is registered."""
        return self._error_handlers.pop(exception_type, None) is not None

    def handle_error(
        self,
        error: BaseException,
        *,
        reraise: bool = False,
        log_level: int = logging.ERROR,
        context: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Report an error and return a standardized description of it.

        Args:
            error: The exception to handle
            reraise: Whether to re-raise the exception after handling
            log_level: Logging level for the error
            context: Additional context information

        Returns:
            Dictionary with error information
        """
        error_msg = f"Error: {error!s}"
        if context:
            error_msg += f" (context: {context})"

        self.logger.log(
            log_level,
            error_msg,
            exc_info=(type(error), error, error.__traceback__),
        )

        for exc_type, handler in self._error_handlers.items():
            if isinstance(error, exc_type):
                try:
                    result = handler(error)
                    if isinstance(result, dict):
                        return result
                except Exception as handler_error:
                    self.logger.error(
                        "Error handler for %s failed: %s", exc_type.__name__, handler_error
                    )

        if isinstance(error, MonoEventError):
            error_dict = error.to_dict()
        else:
            error_dict = {
                "error": error.__class__.__name__,
                "message": str(error),
                "details": {},
            }

        if context:
            error_dict["context"] = context

        if reraise:
            raise error

        return error_dict


# Global error handler instance
default_error_handler = ErrorHandler()


def handle_error(
    error: BaseException,
    *,
    reraise: bool = False,
    log_level: int = logging.ERROR,
    context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Handle an error using the default error handler."""
    return default_error_handler.handle_error(
        error, reraise=reraise, log_level=log_level, context=context
    )

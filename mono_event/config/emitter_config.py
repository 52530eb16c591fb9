"""Emitter options and process-wide defaults.

``EmitterConfig`` holds the defaults applied when an event is created
without explicit options; ``EmitterOptions`` is the immutable, resolved set
of options an event instance captures at creation time.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Literal

from mono_event.errors import ConfigurationError

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

NAME_TO_LEVEL: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class EmitterOptions:
    """Options captured by one event instance."""

    continue_on_error: bool = False
    log_errors: bool = False
    parallel: bool = False
    error_log_level: int = logging.ERROR


@dataclass
class EmitterConfig:
    """Process-wide defaults for newly created events."""

    continue_on_error: bool = False
    log_errors: bool = False
    parallel: bool = False
    error_log_level: LogLevelName = "ERROR"

    def validate(self) -> None:
        """Validate configuration and raise errors for invalid setups."""
        for key in ("continue_on_error", "log_errors", "parallel"):
            value = getattr(self, key)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"{key} must be a bool, got {type(value).__name__}",
                    config_key=key,
                    details={"value": value},
                )

        if self.error_log_level not in NAME_TO_LEVEL:
            raise ConfigurationError(
                f"Unknown log level {self.error_log_level!r}",
                config_key="error_log_level",
                details={"allowed": sorted(NAME_TO_LEVEL)},
            )

    def resolve(
        self,
        *,
        continue_on_error: bool | None = None,
        log_errors: bool | None = None,
        parallel: bool | None = None,
    ) -> EmitterOptions:
        """Fill unset overrides from this config and freeze the result.

        Raises:
            ConfigurationError: If an explicit override is not a bool.
        """
        self.validate()
        overrides = {"continue_on_error": continue_on_error, "log_errors": log_errors, "parallel": parallel}
        for key, value in overrides.items():
            if value is not None and not isinstance(value, bool):
                raise ConfigurationError(
                    f"{key} must be a bool, got {type(value).__name__}",
                    config_key=key,
                    details={"value": value},
                )
        return EmitterOptions(
            continue_on_error=self.continue_on_error if continue_on_error is None else continue_on_error,
            log_errors=self.log_errors if log_errors is None else log_errors,
            parallel=self.parallel if parallel is None else parallel,
            error_log_level=NAME_TO_LEVEL[self.error_log_level],
        )


# Default configuration instance
DEFAULT_CONFIG = EmitterConfig()

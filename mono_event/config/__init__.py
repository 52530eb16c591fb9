"""Configuration management for mono_event."""

from mono_event.config.config_manager import ConfigContext
from mono_event.config.config_manager import config_context
from mono_event.config.config_manager import get_config
from mono_event.config.config_manager import reset_config
from mono_event.config.config_manager import set_config
from mono_event.config.config_manager import update_config
from mono_event.config.emitter_config import DEFAULT_CONFIG
from mono_event.config.emitter_config import EmitterConfig
from mono_event.config.emitter_config import EmitterOptions

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigContext",
    "EmitterConfig",
    "EmitterOptions",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
    "update_config",
]

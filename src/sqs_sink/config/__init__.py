"""
Module: config
Description: Sink configuration.

- settings: system-level fallback configuration (pydantic-settings)
- options: option holder for a single sink definition
- sink_config: validated, immutable publish configuration
"""

from .options import OptionHolder
from .settings import (
    ConfigReader,
    MappingConfigReader,
    SettingsConfigReader,
    SinkSettings,
    settings,
)
from .sink_config import PublishConfig, is_fifo_queue

__all__ = [
    "ConfigReader",
    "MappingConfigReader",
    "OptionHolder",
    "PublishConfig",
    "SettingsConfigReader",
    "SinkSettings",
    "is_fifo_queue",
    "settings",
]

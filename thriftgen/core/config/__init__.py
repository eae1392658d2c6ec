"""Configuration management for thriftgen."""

from thriftgen.core.config.loader import ConfigLoader
from thriftgen.core.config.settings import (
    CompilerSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ConfigLoader",
    "CompilerSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]

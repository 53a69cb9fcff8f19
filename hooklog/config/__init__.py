"""Configuration for hooklog."""

from .hooks import HookSettings
from .logging import LoggingSettings
from .settings import ConfigurationError, Settings


__all__ = ["ConfigurationError", "HookSettings", "LoggingSettings", "Settings"]

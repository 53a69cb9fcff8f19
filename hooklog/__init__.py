"""hooklog: leveled logging with hook dispatch.

:class:`HookHandler` decorates any handler and fires registered hooks whose
levels match a record before forwarding the unchanged record::

    handler = HookHandler(TextHandler(sys.stdout), PrintHook())
    logger = Logger(handler)
    logger.info("hello world", user="alice")
"""

from ._version import __version__
from .handlers import (
    ConsoleHandler,
    Handler,
    HookHandler,
    JSONHandler,
    TextHandler,
)
from .hooks import Hook, HookRegistry
from .hooks.implementations import CallbackHook, CountingHook, PrintHook, StructlogHook
from .levels import Level, level_name, parse_level
from .logger import Logger
from .record import Attr, Record
from .structlog_bridge import HookProcessor


__all__ = [
    "Attr",
    "CallbackHook",
    "ConsoleHandler",
    "CountingHook",
    "Handler",
    "Hook",
    "HookHandler",
    "HookProcessor",
    "HookRegistry",
    "JSONHandler",
    "Level",
    "Logger",
    "PrintHook",
    "Record",
    "StructlogHook",
    "TextHandler",
    "__version__",
    "level_name",
    "parse_level",
]

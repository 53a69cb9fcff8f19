"""Logger front-end that builds records and hands them to a handler."""

from typing import Any

import structlog

from .handlers.base import Handler
from .levels import Level
from .record import Attr, Record


class Logger:
    """Leveled logger over a :class:`~hooklog.handlers.base.Handler`.

    Keyword arguments to the logging methods become record attributes.
    A record is only built when the handler reports the level as enabled.
    Errors raised by the handler propagate to the caller.

    Example:
        logger = Logger(HookHandler(TextHandler(sys.stdout)))
        logger.info("hello world", user="alice")
    """

    def __init__(self, handler: Handler):
        self._handler = handler

    @property
    def handler(self) -> Handler:
        return self._handler

    def enabled(self, level: int) -> bool:
        return self._handler.enabled(structlog.contextvars.get_contextvars(), level)

    def log(self, level: int, message: str, /, **attrs: Any) -> None:
        ctx = structlog.contextvars.get_contextvars()
        if not self._handler.enabled(ctx, level):
            return
        self._handler.handle(ctx, Record.create(level, message, **attrs))

    def debug(self, message: str, /, **attrs: Any) -> None:
        self.log(Level.DEBUG, message, **attrs)

    def info(self, message: str, /, **attrs: Any) -> None:
        self.log(Level.INFO, message, **attrs)

    def warn(self, message: str, /, **attrs: Any) -> None:
        self.log(Level.WARN, message, **attrs)

    warning = warn

    def error(self, message: str, /, **attrs: Any) -> None:
        self.log(Level.ERROR, message, **attrs)

    def bind(self, **attrs: Any) -> "Logger":
        """Logger whose records all carry ``attrs``."""
        if not attrs:
            return self
        return Logger(
            self._handler.with_attrs([Attr(k, v) for k, v in attrs.items()])
        )

    def group(self, name: str) -> "Logger":
        """Logger whose subsequent attributes are nested under ``name``."""
        if not name:
            return self
        return Logger(self._handler.with_group(name))

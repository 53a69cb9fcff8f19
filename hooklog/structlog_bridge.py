"""Fire hooks from a structlog processor chain.

:class:`HookProcessor` lets the same hooks observe events logged through
structlog, without routing those events through a :class:`HookHandler`::

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            HookProcessor(handler.registry),
            structlog.processors.JSONRenderer(),
        ]
    )
"""

from datetime import UTC, datetime
from typing import Any

from structlog.types import EventDict, WrappedLogger

from .handlers.hook_handler import HookHandler
from .hooks.dispatcher import HookDispatcher
from .hooks.registry import HookRegistry
from .levels import Level
from .record import Attr, Record


METHOD_LEVELS: dict[str, int] = {
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "msg": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "error": Level.ERROR,
    "exception": Level.ERROR,
    "critical": Level.ERROR,
    "fatal": Level.ERROR,
}

_RESERVED_KEYS = frozenset({"event", "level", "timestamp"})


class HookProcessor:
    """structlog processor that dispatches each event to matching hooks.

    The event dict is returned unchanged; hooks receive a :class:`Record`
    built from it, with ``event`` as the message and the remaining keys as
    attributes.
    """

    def __init__(
        self,
        source: HookRegistry | HookHandler,
        level_map: dict[str, int] | None = None,
        log_failures: bool = False,
    ):
        """Initialize the processor.

        Args:
            source: Registry to read hooks from, or a hook handler whose
                registry and failure counters are shared
            level_map: Overrides for mapping method/level names to levels
            log_failures: Log hook failures as diagnostic messages
        """
        if isinstance(source, HookHandler):
            self._dispatcher = HookDispatcher(
                source.registry, log_failures=log_failures, failures=source.failures
            )
        else:
            self._dispatcher = HookDispatcher(source, log_failures=log_failures)
        self._level_map = {**METHOD_LEVELS, **(level_map or {})}

    @property
    def dispatcher(self) -> HookDispatcher:
        return self._dispatcher

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        self._dispatcher.dispatch(self.to_record(method_name, event_dict))
        return event_dict

    def to_record(self, method_name: str, event_dict: EventDict) -> Record:
        level_key = str(event_dict.get("level", method_name)).lower()
        level = self._level_map.get(level_key, Level.INFO)
        return Record(
            time=datetime.now(UTC),
            level=level,
            message=str(event_dict.get("event", "")),
            attrs=[
                Attr(key, value)
                for key, value in event_dict.items()
                if key not in _RESERVED_KEYS
            ],
        )

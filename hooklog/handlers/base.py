"""Handler contract and shared stream-writing base class."""

import copy
import sys
import threading
from collections.abc import Mapping, Sequence
from typing import Any, Protocol, TextIO, runtime_checkable

from hooklog.core.errors import HandlerError
from hooklog.levels import Level
from hooklog.record import Attr, Record


__all__ = ["Context", "Handler", "GroupedAttr", "StreamHandler"]


Context = Mapping[str, Any]

# An attribute together with the group path it was bound under.
GroupedAttr = tuple[tuple[str, ...], Attr]


@runtime_checkable
class Handler(Protocol):
    """Contract every handler in a chain satisfies.

    ``ctx`` is the logging context captured at the call site (the structlog
    contextvars bound at that moment). Handlers may ignore it.
    """

    def enabled(self, ctx: Context, level: int) -> bool:
        """Whether a record at ``level`` would be handled"""
        ...

    def handle(self, ctx: Context, record: Record) -> None:
        """Consume one record. Failure is signalled by raising."""
        ...

    def with_attrs(self, attrs: Sequence[Attr]) -> "Handler":
        """Handler that adds ``attrs`` to every record it handles"""
        ...

    def with_group(self, name: str) -> "Handler":
        """Handler that nests subsequent attributes under ``name``"""
        ...


class StreamHandler:
    """Base class for terminal handlers that write one line per record.

    Subclasses implement :meth:`format`. Derived handlers returned by
    :meth:`with_attrs` and :meth:`with_group` share the stream and its lock,
    so lines from related handlers never interleave.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        level: int = Level.INFO,
        add_timestamp: bool = True,
    ):
        self._stream = stream if stream is not None else sys.stderr
        self._level = level
        self._add_timestamp = add_timestamp
        self._groups: tuple[str, ...] = ()
        self._bound: tuple[GroupedAttr, ...] = ()
        self._lock = threading.Lock()

    @property
    def level(self) -> int:
        return self._level

    @property
    def stream(self) -> TextIO:
        return self._stream

    def enabled(self, ctx: Context, level: int) -> bool:
        return level >= self._level

    def with_attrs(self, attrs: Sequence[Attr]) -> "StreamHandler":
        if not attrs:
            return self
        derived = copy.copy(self)
        derived._bound = self._bound + tuple((self._groups, attr) for attr in attrs)
        return derived

    def with_group(self, name: str) -> "StreamHandler":
        if not name:
            return self
        derived = copy.copy(self)
        derived._groups = self._groups + (name,)
        return derived

    def handle(self, ctx: Context, record: Record) -> None:
        line = self.format(ctx, record)
        with self._lock:
            try:
                self._stream.write(line + "\n")
                self._stream.flush()
            except (OSError, ValueError) as e:
                raise HandlerError(
                    f"Failed to write log record: {e}", handler=type(self).__name__
                ) from e

    def format(self, ctx: Context, record: Record) -> str:
        raise NotImplementedError

    def collect_attrs(self, ctx: Context, record: Record) -> list[GroupedAttr]:
        """Context entries, bound attributes, then the record's own attributes"""
        collected: list[GroupedAttr] = [((), Attr(k, v)) for k, v in ctx.items()]
        collected.extend(self._bound)
        collected.extend((self._groups, attr) for attr in record.attrs)
        return collected

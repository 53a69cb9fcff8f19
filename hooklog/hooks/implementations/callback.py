"""Adapter turning a plain callable into a hook."""

from collections.abc import Callable, Collection
from typing import Any

from hooklog.record import Record


class CallbackHook:
    """Calls ``func(record)`` for records at the given levels.

    The callable's return value is ignored.
    """

    def __init__(
        self,
        func: Callable[[Record], Any],
        levels: Collection[int],
        name: str | None = None,
    ):
        self._func = func
        self._levels = frozenset(levels)
        self._name = name or getattr(func, "__name__", "callback_hook")

    @property
    def name(self) -> str:
        return self._name

    @property
    def levels(self) -> frozenset[int]:
        return self._levels

    def fire(self, record: Record) -> None:
        self._func(record)

"""In-memory handlers and hooks used across the test suite."""

from collections.abc import Collection, Sequence
from typing import Any

from hooklog.handlers.base import Context
from hooklog.levels import Level
from hooklog.record import Attr, Record


class RecordingHandler:
    """Terminal handler that keeps what it receives.

    ``lines`` holds ``"<LEVEL> <message>"`` strings. ``events`` is an
    optional list shared with hooks to observe global ordering.
    """

    def __init__(
        self,
        level: int = Level.DEBUG,
        events: list[str] | None = None,
        attrs: Sequence[Attr] = (),
        groups: Sequence[str] = (),
        fail_with: Exception | None = None,
    ):
        self.level = level
        self.events = events if events is not None else []
        self.attrs = list(attrs)
        self.groups = list(groups)
        self.fail_with = fail_with
        self.records: list[Record] = []
        self.contexts: list[dict[str, Any]] = []
        self.lines: list[str] = []

    def enabled(self, ctx: Context, level: int) -> bool:
        return level >= self.level

    def handle(self, ctx: Context, record: Record) -> None:
        self.events.append(f"handler:{record.level_name}")
        if self.fail_with is not None:
            raise self.fail_with
        self.records.append(record)
        self.contexts.append(dict(ctx))
        self.lines.append(f"{record.level_name} {record.message}")

    def with_attrs(self, attrs: Sequence[Attr]) -> "RecordingHandler":
        derived = RecordingHandler(
            self.level, self.events, [*self.attrs, *attrs], self.groups, self.fail_with
        )
        derived.records = self.records
        derived.lines = self.lines
        derived.contexts = self.contexts
        return derived

    def with_group(self, name: str) -> "RecordingHandler":
        derived = RecordingHandler(
            self.level, self.events, self.attrs, [*self.groups, name], self.fail_with
        )
        derived.records = self.records
        derived.lines = self.lines
        derived.contexts = self.contexts
        return derived


class RecordingHook:
    """Hook that records every record it is fired with."""

    def __init__(
        self,
        name: str = "recording_hook",
        levels: Collection[int] = (Level.INFO, Level.ERROR),
        events: list[str] | None = None,
    ):
        self._name = name
        self._levels = levels
        self.events = events if events is not None else []
        self.received: list[Record] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def levels(self) -> Collection[int]:
        return self._levels

    @property
    def call_count(self) -> int:
        return len(self.received)

    def fire(self, record: Record) -> None:
        self.events.append(f"{self._name}:{record.level_name}")
        self.received.append(record)


class MutatingHook(RecordingHook):
    """Hook that rewrites the copy it receives."""

    def fire(self, record: Record) -> None:
        super().fire(record)
        record.message = "mutated by hook"
        record.level = Level.DEBUG
        record.attrs.append(Attr("injected", True))


class FailingHook(RecordingHook):
    """Hook that always fails."""

    def __init__(self, name: str = "failing_hook", **kwargs: Any):
        super().__init__(name=name, **kwargs)

    def fire(self, record: Record) -> None:
        super().fire(record)
        raise ValueError("Test error from failing hook")


class BrokenLevelsHook(RecordingHook):
    """Hook whose levels lookup fails."""

    def __init__(self, name: str = "broken_levels", **kwargs: Any):
        super().__init__(name=name, **kwargs)

    @property
    def levels(self) -> Collection[int]:
        raise RuntimeError("levels unavailable")

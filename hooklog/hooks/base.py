"""Hook protocol."""

from collections.abc import Collection
from typing import Protocol, runtime_checkable

from hooklog.record import Record


@runtime_checkable
class Hook(Protocol):
    """A side effect triggered by records at selected levels.

    ``levels`` may be empty, in which case the hook never fires. Levels that
    are not standard :class:`~hooklog.levels.Level` members only match
    records carrying exactly that value.

    ``fire`` may raise; the dispatcher absorbs the error so that a failing
    hook never disturbs logging.
    """

    @property
    def name(self) -> str:
        """Hook name for debugging"""
        ...

    @property
    def levels(self) -> Collection[int]:
        """Levels this hook wants to observe"""
        ...

    def fire(self, record: Record) -> None:
        """React to one matching record.

        Args:
            record: A private copy of the record being logged
        """
        ...

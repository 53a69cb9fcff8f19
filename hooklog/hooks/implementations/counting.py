"""Counter hook for lightweight per-level metrics."""

import threading
from collections import Counter
from collections.abc import Collection

from hooklog.levels import Level
from hooklog.record import Record


class CountingHook:
    """Counts records per level name.

    By default it observes every standard level. Counts are kept under a
    lock, so the hook can be shared by handlers used from several threads.
    """

    def __init__(self, levels: Collection[int] | None = None):
        self._levels = frozenset(levels if levels is not None else Level)
        self._counts: Counter[str] = Counter()
        self._lock = threading.Lock()
        self._name = "counting_hook"

    @property
    def name(self) -> str:
        return self._name

    @property
    def levels(self) -> frozenset[int]:
        return self._levels

    @property
    def counts(self) -> dict[str, int]:
        with self._lock:
            return dict(self._counts)

    @property
    def total(self) -> int:
        with self._lock:
            return sum(self._counts.values())

    def fire(self, record: Record) -> None:
        with self._lock:
            self._counts[record.level_name] += 1

    def reset(self) -> None:
        with self._lock:
            self._counts.clear()

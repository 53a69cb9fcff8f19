"""Best-effort fan-out of records to matching hooks.

The dispatcher isolates hook failures: every exception raised by
``Hook.fire`` is caught, counted and, only if asked to, logged. Nothing a
hook does can make a logging call fail.
"""

import threading
from collections import Counter

import structlog

from hooklog.record import Record

from .base import Hook
from .registry import HookRegistry, hook_name


class HookFailureStats:
    """Thread-safe counters of hook failures."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_hook: Counter[str] = Counter()

    def record(self, name: str) -> None:
        with self._lock:
            self._by_hook[name] += 1

    @property
    def total(self) -> int:
        with self._lock:
            return sum(self._by_hook.values())

    def by_hook(self) -> dict[str, int]:
        with self._lock:
            return dict(self._by_hook)

    def reset(self) -> None:
        with self._lock:
            self._by_hook.clear()


class HookDispatcher:
    """Fires matching hooks for a record, each on its own copy."""

    def __init__(
        self,
        registry: HookRegistry,
        log_failures: bool = False,
        failures: HookFailureStats | None = None,
    ):
        """Initialize the dispatcher.

        Args:
            registry: Registry to read hooks from
            log_failures: Log each hook failure as a diagnostic message
            failures: Failure counters to share with other dispatchers
        """
        self._registry = registry
        self._log_failures = log_failures
        self.failures = failures or HookFailureStats()
        self._logger = structlog.get_logger(__name__)

    @property
    def registry(self) -> HookRegistry:
        return self._registry

    @property
    def log_failures(self) -> bool:
        return self._log_failures

    def dispatch(self, record: Record) -> int:
        """Fire every hook interested in ``record.level``.

        Args:
            record: The record being logged; it is never passed to a hook
                directly and is left untouched

        Returns:
            Number of hooks that completed without raising
        """
        fired = 0
        for hook in self._registry.snapshot():
            if self._fire(hook, record):
                fired += 1
        return fired

    def _fire(self, hook: Hook, record: Record) -> bool:
        # The level test is inside the try: a hook whose levels raise has failed
        try:
            if record.level not in hook.levels:
                return False
            hook.fire(record.clone())
        except Exception as e:
            name = hook_name(hook)
            self.failures.record(name)
            if self._log_failures:
                self._logger.warning(
                    "hook_fire_failed",
                    hook=name,
                    level=record.level_name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
            return False
        return True

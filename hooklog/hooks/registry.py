"""Ordered registry of hooks shared by a handler and its derived handlers."""

import threading
from collections.abc import Iterator

import structlog

from hooklog.core.errors import HookRegistryFrozenError

from .base import Hook


class HookRegistry:
    """Append-only, copy-on-write list of hooks.

    Writers build a new tuple under a lock and swap it in. Readers take the
    current tuple without locking, so a dispatch running concurrently with
    :meth:`add` sees either the list before or after the addition, never a
    partial one.
    """

    def __init__(self, hooks: tuple[Hook, ...] | list[Hook] = ()) -> None:
        self._hooks: tuple[Hook, ...] = tuple(hooks)
        self._lock = threading.Lock()
        self._frozen = False
        self._logger = structlog.get_logger(__name__)

    def add(self, hook: Hook) -> None:
        """Append a hook after all previously registered hooks."""
        with self._lock:
            if self._frozen:
                raise HookRegistryFrozenError(
                    f"Cannot register {hook_name(hook)}: registry is frozen"
                )
            self._hooks = self._hooks + (hook,)
            position = len(self._hooks) - 1
        self._logger.debug(
            "hook_registered",
            hook=hook_name(hook),
            position=position,
        )

    def freeze(self) -> None:
        """Reject any further :meth:`add` calls."""
        with self._lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def snapshot(self) -> tuple[Hook, ...]:
        """Hooks in registration order"""
        return self._hooks

    def matching(self, level: int) -> list[Hook]:
        """Hooks interested in ``level``, in registration order"""
        return [hook for hook in self._hooks if level in hook.levels]

    def __len__(self) -> int:
        return len(self._hooks)

    def __iter__(self) -> Iterator[Hook]:
        return iter(self._hooks)

    def __contains__(self, hook: object) -> bool:
        return hook in self._hooks


def hook_name(hook: Hook) -> str:
    return getattr(hook, "name", None) or type(hook).__name__

"""Exception types for hooklog.

Only :class:`HandlerError` (and whatever an inner handler raises itself)
ever reaches the caller of a logging call. Hook failures, including
:class:`HookError`, are always absorbed by the dispatcher.
"""

__all__ = [
    "HooklogError",
    "HandlerError",
    "HookError",
    "HookRegistryFrozenError",
]


class HooklogError(Exception):
    """Base class for all hooklog errors."""

    pass


class HandlerError(HooklogError):
    """Raised when a terminal handler fails to write a record."""

    def __init__(self, message: str, handler: str | None = None):
        super().__init__(message)
        self.handler = handler


class HookError(HooklogError):
    """Raised by a hook that could not react to a record.

    Hook authors may raise any exception; this type exists so that hooks
    have a descriptive error to raise. It is never propagated.
    """

    def __init__(self, message: str, hook: str | None = None):
        super().__init__(message)
        self.hook = hook


class HookRegistryFrozenError(HooklogError):
    """Raised when adding a hook to a registry that has been frozen."""

    pass

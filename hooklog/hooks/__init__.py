"""Hook system for hooklog.

Key components:
- Hook: Protocol for hook implementations
- HookRegistry: Ordered, copy-on-write list of hooks
- HookDispatcher: Fires matching hooks with error isolation
"""

from .base import Hook
from .dispatcher import HookDispatcher, HookFailureStats
from .registry import HookRegistry


__all__ = ["Hook", "HookDispatcher", "HookFailureStats", "HookRegistry"]

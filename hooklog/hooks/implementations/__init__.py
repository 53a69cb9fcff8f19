"""Built-in hook implementations.

- PrintHook: Print matching records to a stream
- CallbackHook: Adapt a plain callable
- CountingHook: Per-level counters
- StructlogHook: Forward matching records to a structlog logger
"""

from .callback import CallbackHook
from .counting import CountingHook
from .printing import PrintHook
from .structlog_hook import StructlogHook


__all__ = ["CallbackHook", "CountingHook", "PrintHook", "StructlogHook"]

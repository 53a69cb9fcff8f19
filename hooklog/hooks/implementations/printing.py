"""Hook that prints matching records."""

import sys
from collections.abc import Collection
from typing import TextIO

from hooklog.levels import Level
from hooklog.record import Record


class PrintHook:
    """Prints ``HOOK FIRED: <LEVEL> <message>`` for matching records"""

    def __init__(
        self,
        levels: Collection[int] = (Level.INFO, Level.ERROR),
        stream: TextIO | None = None,
    ):
        self._levels = frozenset(levels)
        self._stream = stream
        self._name = "print_hook"

    @property
    def name(self) -> str:
        return self._name

    @property
    def levels(self) -> frozenset[int]:
        return self._levels

    def fire(self, record: Record) -> None:
        # stdout may be redirected after construction
        stream = self._stream if self._stream is not None else sys.stdout
        print("HOOK FIRED:", record.level_name, record.message, file=stream)

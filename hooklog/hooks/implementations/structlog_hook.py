"""Hook that re-emits matching records on a structlog logger."""

from collections.abc import Collection
from typing import Any

import structlog

from hooklog.levels import Level
from hooklog.record import Record


class StructlogHook:
    """Forward matching records to a structlog logger.

    Useful for side-channel alerting: records at the chosen levels are
    re-logged as ``log_record_forwarded`` events with the original message,
    level and attributes as key/value context.
    """

    def __init__(
        self,
        levels: Collection[int] = (Level.ERROR,),
        logger: Any | None = None,
    ):
        """Initialize structlog hook.

        Args:
            levels: Levels to forward
            logger: Optional structlog logger instance. If None, creates a new one.
        """
        self.logger = logger or structlog.get_logger(__name__)
        self._levels = frozenset(levels)
        self._name = "structlog_hook"

    @property
    def name(self) -> str:
        return self._name

    @property
    def levels(self) -> frozenset[int]:
        return self._levels

    def fire(self, record: Record) -> None:
        log_data: dict[str, Any] = {
            "record_level": record.level_name,
            "record_message": record.message,
            "record_time": record.time.isoformat(),
        }
        if record.attrs:
            log_data["attrs"] = record.attrs_dict()

        method = self._get_log_method(record.level)
        method("log_record_forwarded", **log_data)

    def _get_log_method(self, level: int) -> Any:
        if level >= Level.ERROR:
            return self.logger.error
        if level >= Level.WARN:
            return self.logger.warning
        if level >= Level.INFO:
            return self.logger.info
        return self.logger.debug

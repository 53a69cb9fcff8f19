"""logfmt-style text handler."""

from datetime import datetime
from typing import Any

from hooklog.record import Record

from .base import Context, StreamHandler


def _needs_quoting(text: str) -> bool:
    if not text:
        return True
    return any(c in text for c in ' ="\\') or not text.isprintable()


def format_value(value: Any) -> str:
    """Render a value for a ``key=value`` pair, quoting when needed."""
    if isinstance(value, datetime):
        text = value.isoformat()
    elif isinstance(value, BaseException):
        text = f"{type(value).__name__}: {value}"
    else:
        text = str(value)

    if not _needs_quoting(text):
        return text
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


class TextHandler(StreamHandler):
    """Writes ``time=... level=INFO msg="hello world" user=alice`` lines.

    Attributes bound under groups are written with dotted keys
    (``request.id=42``).
    """

    def format(self, ctx: Context, record: Record) -> str:
        parts: list[str] = []
        if self._add_timestamp:
            parts.append(f"time={record.time.isoformat()}")
        parts.append(f"level={record.level_name}")
        parts.append(f"msg={format_value(record.message)}")
        for groups, attr in self.collect_attrs(ctx, record):
            key = ".".join((*groups, attr.key))
            parts.append(f"{key}={format_value(attr.value)}")
        return " ".join(parts)

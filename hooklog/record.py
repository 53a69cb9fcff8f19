"""Log record value passed through the handler chain."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from .levels import level_name


@dataclass(frozen=True)
class Attr:
    """A single key/value attribute attached to a record."""

    key: str
    value: Any


@dataclass
class Record:
    """One log event.

    A record is built by the logger front-end at the call site, consumed
    synchronously by the handler chain and discarded afterwards. Hooks
    receive a :meth:`clone`, so any change they make stays local to their
    copy.
    """

    time: datetime
    level: int
    message: str
    attrs: list[Attr] = field(default_factory=list)

    @classmethod
    def create(cls, level: int, message: str, /, **attrs: Any) -> "Record":
        """Build a record stamped with the current UTC time."""
        return cls(
            time=datetime.now(UTC),
            level=level,
            message=message,
            attrs=[Attr(key, value) for key, value in attrs.items()],
        )

    @property
    def level_name(self) -> str:
        return level_name(self.level)

    def add_attrs(self, *attrs: Attr) -> None:
        self.attrs.extend(attrs)

    def attrs_dict(self) -> dict[str, Any]:
        return {attr.key: attr.value for attr in self.attrs}

    def clone(self) -> "Record":
        """Return an independent copy.

        ``Attr`` is immutable, so copying the list is enough to keep the
        copy's attributes separate from the original's.
        """
        return Record(
            time=self.time,
            level=self.level,
            message=self.message,
            attrs=list(self.attrs),
        )

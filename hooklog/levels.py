"""Severity levels for log records."""

from enum import IntEnum


class Level(IntEnum):
    """Standard severity levels.

    Values are spaced by four so that custom levels can sit between the
    standard ones (``Level.INFO + 2`` renders as ``INFO+2``).
    """

    DEBUG = -4
    INFO = 0
    WARN = 4
    ERROR = 8

    def __str__(self) -> str:
        return self.name


_ALIASES = {"WARNING": Level.WARN, "ERR": Level.ERROR, "FATAL": Level.ERROR}


def level_name(value: int) -> str:
    """Render a level value, using an offset from the nearest standard level.

    Args:
        value: Any integer level

    Returns:
        ``"INFO"`` for a standard level, ``"INFO+2"``/``"DEBUG-2"`` otherwise
    """
    try:
        return Level(value).name
    except ValueError:
        pass

    base = Level.DEBUG
    for level in Level:
        if level <= value:
            base = level
    offset = value - base
    return f"{base.name}{offset:+d}"


def parse_level(value: str | int) -> int:
    """Parse a level name, ``NAME+N`` offset, or integer.

    Raises:
        ValueError: If the value is not a recognised level
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid log level: {value!r}")
    if isinstance(value, int):
        return value

    text = value.strip().upper()
    try:
        return int(text)
    except ValueError:
        pass

    name, sign, offset = text, 1, 0
    for separator, separator_sign in (("+", 1), ("-", -1)):
        if separator in text:
            name, _, raw_offset = text.partition(separator)
            sign = separator_sign
            try:
                offset = int(raw_offset)
            except ValueError:
                raise ValueError(f"Invalid log level: {value!r}") from None
            break

    if name in Level.__members__:
        base = Level[name]
    elif name in _ALIASES:
        base = _ALIASES[name]
    else:
        valid = [level.name for level in Level]
        raise ValueError(f"Invalid log level: {value!r}. Must be one of {valid}")
    return int(base) + sign * offset

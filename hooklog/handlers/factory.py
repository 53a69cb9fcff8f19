"""Build handler chains from settings."""

from collections.abc import Iterable
from typing import TextIO

from rich.console import Console

from hooklog.config.settings import Settings
from hooklog.hooks.base import Hook
from hooklog.levels import parse_level

from .base import StreamHandler
from .console import CUSTOM_THEME, ConsoleHandler
from .hook_handler import HookHandler
from .jsonl import JSONHandler
from .text import TextHandler


def build_handler(settings: Settings, stream: TextIO | None = None) -> StreamHandler:
    """Terminal handler for ``settings.logging.format``."""
    config = settings.logging
    level = parse_level(config.level)

    if config.format == "json":
        return JSONHandler(stream, level=level, add_timestamp=config.add_timestamp)
    if config.format == "rich":
        console = Console(theme=CUSTOM_THEME, file=stream) if stream is not None else None
        return ConsoleHandler(console, level=level, add_timestamp=config.add_timestamp)
    return TextHandler(stream, level=level, add_timestamp=config.add_timestamp)


def build_hook_handler(
    settings: Settings,
    stream: TextIO | None = None,
    hooks: Iterable[Hook] = (),
) -> HookHandler:
    """Terminal handler wrapped in a :class:`HookHandler`.

    When ``freeze_hooks`` is set, the registry is frozen after ``hooks`` are
    registered.
    """
    handler = HookHandler(
        build_handler(settings, stream),
        *hooks,
        log_failures=settings.logging.log_hook_failures,
    )
    if settings.logging.freeze_hooks:
        handler.registry.freeze()
    return handler

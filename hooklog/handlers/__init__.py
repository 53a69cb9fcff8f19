"""Handlers: the handler contract, terminal handlers and the hook decorator."""

from .base import Context, Handler, StreamHandler
from .console import ConsoleHandler
from .factory import build_handler, build_hook_handler
from .hook_handler import HookHandler
from .jsonl import JSONHandler
from .text import TextHandler


__all__ = [
    "ConsoleHandler",
    "Context",
    "Handler",
    "HookHandler",
    "JSONHandler",
    "StreamHandler",
    "TextHandler",
    "build_handler",
    "build_hook_handler",
]

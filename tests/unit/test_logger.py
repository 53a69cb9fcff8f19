"""Tests for the Logger front-end, including the end-to-end hook scenario."""

import io
import sys

import pytest
import structlog

from hooklog.handlers import HookHandler, TextHandler
from hooklog.hooks.implementations import PrintHook
from hooklog.levels import Level
from hooklog.logger import Logger
from hooklog.record import Attr
from tests.support.recording import RecordingHandler, RecordingHook


class LineHandler(RecordingHandler):
    """Writes ``<LEVEL> <message>`` to stdout."""

    def handle(self, ctx, record) -> None:
        super().handle(ctx, record)
        print(record.level_name, record.message, file=sys.stdout)


class TestLogger:
    def test_level_methods(self, inner):
        logger = Logger(inner)

        logger.debug("d")
        logger.info("i")
        logger.warn("w")
        logger.warning("w2")
        logger.error("e")
        logger.log(Level.INFO + 1, "custom")

        assert inner.lines == [
            "DEBUG d",
            "INFO i",
            "WARN w",
            "WARN w2",
            "ERROR e",
            "INFO+1 custom",
        ]

    def test_kwargs_become_attrs(self, inner):
        Logger(inner).info("hello world", user="alice", attempt=2)

        assert inner.records[0].attrs == [Attr("user", "alice"), Attr("attempt", 2)]

    def test_disabled_levels_skip_handler(self, events):
        handler = HookHandler(RecordingHandler(level=Level.WARN, events=events))
        hook = RecordingHook(levels=[Level.INFO])
        handler.add_hook(hook)

        Logger(handler).info("not enabled")

        assert events == []
        assert hook.call_count == 0

    def test_enabled(self):
        logger = Logger(RecordingHandler(level=Level.WARN))

        assert not logger.enabled(Level.INFO)
        assert logger.enabled(Level.ERROR)

    def test_bind_and_group(self, inner):
        logger = Logger(inner)
        scoped = logger.bind(service="api").group("request")

        scoped.info("x")

        assert scoped.handler.attrs == [Attr("service", "api")]
        assert scoped.handler.groups == ["request"]
        assert logger.bind() is logger
        assert logger.group("") is logger

    def test_structlog_context_is_passed(self, inner):
        structlog.contextvars.bind_contextvars(request_id="r-1")

        Logger(inner).info("hello")

        assert inner.contexts == [{"request_id": "r-1"}]

    def test_handler_errors_propagate(self):
        logger = Logger(RecordingHandler(fail_with=RuntimeError("broken pipe")))

        with pytest.raises(RuntimeError, match="broken pipe"):
            logger.error("oh no")


class TestEndToEnd:
    def test_print_hook_fires_before_inner_output(self, capsys):
        handler = HookHandler(LineHandler())
        handler.add_hook(PrintHook(levels=[Level.INFO, Level.ERROR]))
        logger = Logger(handler)

        logger.info("hello world")
        logger.warn("should not fire")
        logger.error("oh no")

        assert capsys.readouterr().out.splitlines() == [
            "HOOK FIRED: INFO hello world",
            "INFO hello world",
            "WARN should not fire",
            "HOOK FIRED: ERROR oh no",
            "ERROR oh no",
        ]

    def test_with_text_handler(self):
        stream = io.StringIO()
        handler = HookHandler(TextHandler(stream, add_timestamp=False))
        handler.add_hook(PrintHook(stream=stream))
        logger = Logger(handler)

        logger.info("hello world", user="alice")
        logger.warn("this should NOT fire the hook")
        logger.error("oh no")

        assert stream.getvalue().splitlines() == [
            "HOOK FIRED: INFO hello world",
            'level=INFO msg="hello world" user=alice',
            'level=WARN msg="this should NOT fire the hook"',
            "HOOK FIRED: ERROR oh no",
            'level=ERROR msg="oh no"',
        ]


class TestAttributeNames:
    def test_level_and_message_are_plain_attrs(self, inner):
        logger = Logger(inner)

        logger.info("request done", level="high")
        logger.error("failed", message="upstream timeout")
        logger.log(Level.WARN, "custom", level=3, message="m")

        assert inner.lines == ["INFO request done", "ERROR failed", "WARN custom"]
        assert inner.records[0].attrs == [Attr("level", "high")]
        assert inner.records[1].attrs == [Attr("message", "upstream timeout")]
        assert inner.records[2].attrs_dict() == {"level": 3, "message": "m"}

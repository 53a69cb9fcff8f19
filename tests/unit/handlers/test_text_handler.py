import io
from datetime import UTC, datetime

import pytest

from hooklog.core.errors import HandlerError
from hooklog.handlers import Handler, TextHandler
from hooklog.handlers.text import format_value
from hooklog.levels import Level
from hooklog.record import Attr, Record


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


def _record(level=Level.INFO, message="hello world", **attrs) -> Record:
    return Record(
        time=datetime(2024, 5, 1, 12, 0, tzinfo=UTC),
        level=level,
        message=message,
        attrs=[Attr(k, v) for k, v in attrs.items()],
    )


class TestTextHandler:
    def test_line_format(self, stream):
        TextHandler(stream).handle({}, _record(user="alice"))

        assert stream.getvalue() == (
            'time=2024-05-01T12:00:00+00:00 level=INFO msg="hello world" user=alice\n'
        )

    def test_without_timestamp(self, stream):
        TextHandler(stream, add_timestamp=False).handle({}, _record(message="hi"))

        assert stream.getvalue() == "level=INFO msg=hi\n"

    def test_enabled_respects_minimum_level(self, stream):
        handler = TextHandler(stream, level=Level.WARN)

        assert not handler.enabled({}, Level.INFO)
        assert handler.enabled({}, Level.WARN)
        assert handler.enabled({}, Level.ERROR)

    def test_with_attrs_and_groups(self, stream):
        handler = (
            TextHandler(stream, add_timestamp=False)
            .with_attrs([Attr("service", "api")])
            .with_group("request")
            .with_attrs([Attr("id", 42)])
        )

        handler.handle({}, _record(message="done", status=200))

        assert stream.getvalue() == (
            "level=INFO msg=done service=api request.id=42 request.status=200\n"
        )

    def test_derivation_does_not_change_parent(self, stream):
        parent = TextHandler(stream, add_timestamp=False)
        parent.with_attrs([Attr("k", "v")]).with_group("g")

        parent.handle({}, _record(message="x", a=1))

        assert stream.getvalue() == "level=INFO msg=x a=1\n"

    def test_empty_derivations_return_self(self, stream):
        handler = TextHandler(stream)

        assert handler.with_attrs([]) is handler
        assert handler.with_group("") is handler

    def test_context_rendered_first(self, stream):
        TextHandler(stream, add_timestamp=False).handle(
            {"request_id": "r1"}, _record(message="x", a=1)
        )

        assert stream.getvalue() == "level=INFO msg=x request_id=r1 a=1\n"

    def test_write_failure_raises_handler_error(self, stream):
        handler = TextHandler(stream)
        stream.close()

        with pytest.raises(HandlerError) as exc_info:
            handler.handle({}, _record())

        assert exc_info.value.handler == "TextHandler"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_satisfies_handler_protocol(self, stream):
        assert isinstance(TextHandler(stream), Handler)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", "plain"),
        ("two words", '"two words"'),
        ("", '""'),
        ('say "hi"', '"say \\"hi\\""'),
        ("a=b", '"a=b"'),
        ("line\nbreak", '"line\\nbreak"'),
        (42, "42"),
        (None, "None"),
        (ValueError("bad"), '"ValueError: bad"'),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected

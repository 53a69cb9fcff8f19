"""Shared test fixtures and configuration for hooklog tests."""

import pytest
import structlog

from hooklog.core.logging import setup_logging
from hooklog.handlers.hook_handler import HookHandler
from tests.support.recording import RecordingHandler, RecordingHook


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom settings."""
    # Diagnostics go to stderr; stdout is reserved for handler output.
    setup_logging(log_level_name="DEBUG")


@pytest.fixture(autouse=True)
def structlog_defaults():
    """Restore the test logging configuration and clear bound context."""
    setup_logging(log_level_name="DEBUG")
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def events() -> list[str]:
    """Shared event log for ordering assertions."""
    return []


@pytest.fixture
def inner(events: list[str]) -> RecordingHandler:
    return RecordingHandler(events=events)


@pytest.fixture
def hook_handler(inner: RecordingHandler) -> HookHandler:
    return HookHandler(inner)


@pytest.fixture
def info_error_hook(events: list[str]) -> RecordingHook:
    return RecordingHook(name="info_error", events=events)


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the unit marker to every collected test."""
    for item in items:
        item.add_marker(pytest.mark.unit)

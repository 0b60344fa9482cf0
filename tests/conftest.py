"""Shared test fixtures for the text formatter."""

import io
import logging
from collections.abc import Callable, Iterator
from datetime import datetime, timezone
from typing import Any

import pytest
import structlog

from textformatter.formatter import TextFormatter, TextFormatterOptions
from textformatter.levels import Level
from textformatter.record import Record

FIXED_TIME = datetime(2024, 5, 1, 10, 0, 0, 500000, tzinfo=timezone.utc)
FIXED_TIME_TEXT = "2024-05-01T10:00:00.5Z"


class FakeTTY(io.StringIO):
    """An in-memory stream that claims to be a terminal."""

    def isatty(self) -> bool:
        return True


@pytest.fixture
def options() -> TextFormatterOptions:
    """Formatted layout, full timestamps, no colors."""
    return TextFormatterOptions(force_formatting=True, full_timestamp=True, disable_colors=True)


@pytest.fixture
def formatter(options: TextFormatterOptions) -> TextFormatter:
    return TextFormatter(options)


@pytest.fixture
def plain_formatter() -> TextFormatter:
    """Default options: plain layout for non-terminal sinks."""
    return TextFormatter()


@pytest.fixture
def make_record() -> Callable[..., Record]:
    """Factory for records at FIXED_TIME with a DEBUG "TeSt" message by default."""

    def _make(
        data: dict[str, Any] | None = None,
        level: Level = Level.DEBUG,
        message: str = "TeSt",
        **kwargs: Any,
    ) -> Record:
        return Record(level=level, time=FIXED_TIME, message=message, data=data or {}, **kwargs)

    return _make


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Restore structlog defaults and the root logger's handlers after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)

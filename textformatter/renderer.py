"""structlog and stdlib ``logging`` adapters for TextFormatter.

TextRenderer is the final processor of a structlog chain. It converts the
event dict into a Record and returns the formatted line without its trailing
newline, since structlog loggers terminate lines themselves.
"""

import sys
from collections.abc import MutableMapping
from datetime import datetime, timezone
from typing import Any

import structlog

from textformatter.formatter import TextFormatter
from textformatter.levels import Level
from textformatter.record import ERROR_KEY, Record


class TextRenderer:
    """Render structlog event dicts with a TextFormatter.

    Args:
        formatter: The formatter to render with. Defaults to one with default options.
        stream: The sink the rendered lines are written to, used for terminal
            detection. Defaults to whatever ``sys.stdout`` is at render time.
    """

    def __init__(self, formatter: TextFormatter | None = None, stream: Any = None) -> None:
        self.formatter = formatter or TextFormatter()
        self.stream = stream

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> str:
        record = self.to_record(method_name, event_dict)
        return self.formatter.format(record).decode("utf-8", errors="backslashreplace").rstrip("\n")

    def to_record(self, method_name: str, event_dict: MutableMapping[str, Any]) -> Record:
        """Build a Record from an event dict without modifying it.

        ``event`` becomes the message, ``level`` (or the method name) the
        level, ``timestamp`` the time; an ``exc_info`` exception becomes the
        error field unless one is already set. Every other key is a data field.
        """
        data = dict(event_dict)
        message = data.pop("event", "")
        level_name = data.pop("level", None) or method_name
        level = level_name if isinstance(level_name, Level) else Level.parse(level_name)
        error = _exception(data.pop("exc_info", None))
        if error is not None:
            data.setdefault(ERROR_KEY, error)
        raw_time = data.pop("timestamp", None)
        when = _to_datetime(raw_time)
        if when is None:
            when = datetime.now(timezone.utc)
            if raw_time is not None:
                data["timestamp"] = raw_time

        return Record(
            level=level,
            time=when,
            message="" if message is None else str(message),
            data=data,
            output=self.stream if self.stream is not None else sys.stdout,
        )


def processor_formatter(renderer: TextRenderer | None = None) -> structlog.stdlib.ProcessorFormatter:
    """Build a stdlib logging.Formatter that renders through a TextRenderer.

    Records from plain ``logging`` loggers get their level, ``extra`` fields
    and a timestamp added before rendering. Attributes that other handlers'
    formatters cache on the record are dropped.
    """
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer or TextRenderer(),
        ],
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ExtraAdder(),
            drop_formatter_attributes,
            structlog.processors.TimeStamper(fmt=None),
        ],
    )


# Set on LogRecords by logging.Formatter.format, not by the caller.
FORMATTER_ATTRIBUTES: tuple[str, ...] = ("message", "asctime")


def drop_formatter_attributes(
    logger: Any,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Remove LogRecord attributes cached by earlier formatters from the event dict."""
    for key in FORMATTER_ATTRIBUTES:
        event_dict.pop(key, None)
    return event_dict


def _exception(exc_info: Any) -> BaseException | None:
    if exc_info is True:
        exc_info = sys.exc_info()
    if isinstance(exc_info, tuple) and len(exc_info) == 3:
        exc_info = exc_info[1]
    if isinstance(exc_info, BaseException):
        return exc_info
    return None


def _to_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None

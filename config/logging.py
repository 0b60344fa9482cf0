"""Logging configuration using structlog and the text formatter.

Both structlog loggers and plain stdlib loggers render through the same
TextRenderer, so every line on the stream shares one layout. Terminals get
the formatted layout; other sinks get plain key=value lines unless
force_formatting is set.
"""

import logging
import sys
from typing import Any

import structlog

from config.settings import TextFormatterSettings
from textformatter.formatter import TextFormatter
from textformatter.renderer import TextRenderer, processor_formatter

def configure_logging(
    settings: TextFormatterSettings | None = None,
    stream: Any = None,
) -> TextRenderer:
    """Configure structlog and the stdlib root logger for the application.

    Args:
        settings: Formatter and level settings. Loaded from the environment when omitted.
        stream: Output stream. Defaults to stderr.

    Returns:
        The TextRenderer installed in both pipelines.
    """
    settings = settings or TextFormatterSettings()
    stream = stream if stream is not None else sys.stderr
    level = logging.getLevelNamesMapping().get(settings.log_level.strip().upper(), logging.INFO)

    renderer = TextRenderer(TextFormatter(settings.to_options()), stream=stream)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt=None),
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(processor_formatter(renderer))
    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    structlog.get_logger().debug("logging.configured", environment=settings.environment)
    return renderer

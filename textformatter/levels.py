"""Severity levels and their presentation.

Levels mirror the host framework's ordered enumeration. The formatted layout
always shows warn as the four-letter ``warn`` so the level column stays five
characters wide; the plain layout keeps the canonical ``warning``.
"""

import logging
from enum import IntEnum

from textformatter.colors import ColorFunc, CompiledColorScheme


class Level(IntEnum):
    """Ordered log severity: DEBUG < INFO < WARN < ERROR < FATAL < PANIC."""

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50
    PANIC = 60

    @property
    def canonical_name(self) -> str:
        """Return the host-framework name of the level."""
        return _CANONICAL_NAMES[self]

    @classmethod
    def parse(cls, name: str | None) -> "Level":
        """Map a structlog or stdlib level name to a Level.

        Unknown or missing names fall back to DEBUG, the catch-all level.
        """
        if not name:
            return cls.DEBUG
        return _NAME_ALIASES.get(str(name).strip().lower(), cls.DEBUG)

    @classmethod
    def from_stdlib(cls, levelno: int) -> "Level":
        """Map a numeric stdlib ``logging`` level to a Level."""
        if levelno >= logging.CRITICAL:
            return cls.FATAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG


_CANONICAL_NAMES: dict[Level, str] = {
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warning",
    Level.ERROR: "error",
    Level.FATAL: "fatal",
    Level.PANIC: "panic",
}

_NAME_ALIASES: dict[str, Level] = {
    "notset": Level.DEBUG,
    "trace": Level.DEBUG,
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "error": Level.ERROR,
    "exception": Level.ERROR,
    "critical": Level.FATAL,
    "fatal": Level.FATAL,
    "panic": Level.PANIC,
}


def level_color(level: Level, scheme: CompiledColorScheme) -> ColorFunc:
    """Select the color function for a level from a compiled scheme.

    Args:
        level: The record's severity.
        scheme: The compiled color table in effect for this call.

    Returns:
        The like-named slot for info through panic, the debug slot otherwise.
    """
    if level == Level.INFO:
        return scheme.info
    if level == Level.WARN:
        return scheme.warn
    if level == Level.ERROR:
        return scheme.error
    if level == Level.FATAL:
        return scheme.fatal
    if level == Level.PANIC:
        return scheme.panic
    return scheme.debug


def level_text(level: Level, lowercase: bool = False) -> str:
    """Return the level label used by the formatted layout."""
    text = "warn" if level == Level.WARN else level.canonical_name
    return text if lowercase else text.upper()

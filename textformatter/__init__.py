"""Human-readable, optionally colorized, single-line log formatting."""

from textformatter.colors import ColorScheme, CompiledColorScheme, compile_color_scheme
from textformatter.errors import ColorSchemeError, TextFormatterError
from textformatter.formatter import TextFormatter, TextFormatterBuilder, TextFormatterOptions
from textformatter.levels import Level
from textformatter.record import ERROR_KEY, Record
from textformatter.renderer import TextRenderer, processor_formatter

__all__ = [
    "ColorScheme",
    "ColorSchemeError",
    "CompiledColorScheme",
    "ERROR_KEY",
    "Level",
    "Record",
    "TextFormatter",
    "TextFormatterBuilder",
    "TextFormatterError",
    "TextFormatterOptions",
    "TextRenderer",
    "compile_color_scheme",
    "processor_formatter",
]

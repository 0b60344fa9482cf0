"""Text formatter: renders one Record into one line of bytes.

Two layouts are produced. The formatted layout, used for terminals or when
forced, puts the tag, prefix and function fields in aligned columns ahead of
the message and wraps the remaining fields in parentheses:

    2024-05-01T10:00:00.5Z DEBUG :12345: ppp.fff: message (error={boom} a=1)

The plain layout, used for every other sink, is a flat logfmt-style line:

    time="2024-05-01T10:00:00.5Z" level=debug msg=message a=1

Options are finalized once when the formatter is built; ``format`` itself
takes no locks and never raises.
"""

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

from textformatter.colors import (
    DEFAULT_COMPILED_SCHEME,
    NO_COLORS,
    ColorScheme,
    CompiledColorScheme,
    compile_color_scheme,
)
from textformatter.levels import level_color, level_text
from textformatter.record import ERROR_KEY, Record
from textformatter.terminal import is_terminal
from textformatter.timestamps import RFC3339NANO, format_elapsed, format_timestamp
from textformatter.values import error_text, is_text_like, quote, render_value

log = structlog.get_logger()

DEFAULT_PREFIX_FIELD_NAME = "__p"
DEFAULT_TAG_FIELD_NAME = "__t"
DEFAULT_FUNC_FIELD_NAME = "__f"
DEFAULT_QUOTE_CHARACTER = '"'

MISSING_SUFFIX = "<missing>"

# Keys the plain layout writes itself; user fields with these names are moved.
CLASHING_KEYS: tuple[str, ...] = ("time", "msg", "level")


class TextFormatterOptions(BaseModel):
    """Formatter configuration.

    Empty names and formats mean "use the default" and are filled in by
    finalized(); explicit values are never overwritten.

    Attributes:
        force_colors: Colorize even when the sink is not a terminal.
        disable_colors: Never colorize.
        force_formatting: Use the formatted layout for non-terminal sinks.
        disable_timestamp: Omit the timestamp.
        lowercase_levels: Show level labels in lowercase.
        full_timestamp: Show the record time instead of seconds since start.
        timestamp_format: strftime format, or RFC3339NANO.
        prefix_field_name: Data key holding the prefix.
        prefix_field_width: Target width of the prefix column.
        func_field_name: Data key holding the function name.
        tag_field_name: Data key holding the tag.
        tag_field_width: Target width of the tag column.
        quote_character: Quote wrapped around plain-layout values that need it.
        color_scheme: Per-role style overrides; None uses the shared defaults.
    """

    model_config = ConfigDict(frozen=True)

    force_colors: bool = False
    disable_colors: bool = False
    force_formatting: bool = False
    disable_timestamp: bool = False
    lowercase_levels: bool = False
    full_timestamp: bool = False
    timestamp_format: str = ""
    prefix_field_name: str = ""
    prefix_field_width: int = Field(default=0, ge=0)
    func_field_name: str = ""
    tag_field_name: str = ""
    tag_field_width: int = Field(default=0, ge=0)
    quote_character: str = Field(default="", max_length=1)
    color_scheme: ColorScheme | None = None

    def finalized(self) -> "TextFormatterOptions":
        """Return a copy with defaults applied to every unset field."""
        return self.model_copy(
            update={
                "prefix_field_name": self.prefix_field_name or DEFAULT_PREFIX_FIELD_NAME,
                "tag_field_name": self.tag_field_name or DEFAULT_TAG_FIELD_NAME,
                "func_field_name": self.func_field_name or DEFAULT_FUNC_FIELD_NAME,
                "timestamp_format": self.timestamp_format or RFC3339NANO,
                "quote_character": self.quote_character or DEFAULT_QUOTE_CHARACTER,
            }
        )


class TextFormatter:
    """Renders Records as single text lines.

    Instances are immutable apart from set_color_scheme() and may be shared
    by any number of threads.
    """

    def __init__(self, options: TextFormatterOptions | None = None) -> None:
        self.options = (options or TextFormatterOptions()).finalized()
        if self.options.color_scheme is not None:
            self._colors: CompiledColorScheme = compile_color_scheme(self.options.color_scheme)
        else:
            self._colors = DEFAULT_COMPILED_SCHEME

    @classmethod
    def builder(cls) -> "TextFormatterBuilder":
        return TextFormatterBuilder()

    @property
    def reserved_keys(self) -> frozenset[str]:
        """Data keys rendered in fixed columns by the formatted layout."""
        return frozenset(
            (
                self.options.prefix_field_name,
                self.options.tag_field_name,
                self.options.func_field_name,
            )
        )

    def set_color_scheme(self, scheme: ColorScheme) -> None:
        """Compile and install a new color scheme for subsequent calls.

        Raises:
            ColorSchemeError: If a style name cannot be parsed.
        """
        self._colors = compile_color_scheme(scheme)
        log.info("text_formatter.color_scheme_changed", scheme=scheme.model_dump())

    def format(self, record: Record) -> bytearray:
        """Render a record as one newline-terminated line.

        Args:
            record: The event to render. Its data mapping is not modified.

        Returns:
            The record's buffer with the line appended, or a new bytearray
            when the record carries no buffer.
        """
        opts = self.options
        terminal = is_terminal(record.output)
        formatted = opts.force_formatting or terminal
        colored = formatted and not opts.disable_colors and (opts.force_colors or terminal)

        if formatted:
            line = self._format_formatted(record, self._colors if colored else NO_COLORS)
        else:
            line = self._format_plain(record)

        buf = record.buffer if record.buffer is not None else bytearray()
        buf += line.encode("utf-8", errors="backslashreplace")
        buf += b"\n"
        return buf

    def _format_formatted(self, record: Record, colors: CompiledColorScheme) -> str:
        opts = self.options
        data = record.data
        color = level_color(record.level, colors)
        out: list[str] = []

        if not opts.disable_timestamp:
            if opts.full_timestamp:
                ts = format_timestamp(record.time, opts.timestamp_format)
            else:
                ts = format_elapsed()
            out.append(color(ts))
            out.append(" ")

        out.append(color(f"{level_text(record.level, opts.lowercase_levels):>5}"))
        out.append(" ")

        if opts.tag_field_name in data:
            tag = data[opts.tag_field_name]
            text = f":{tag if is_text_like(tag) else repr(tag)}:"
            out.append(colors.tag(text))
            out.append(_padding(len(text), opts.tag_field_width))
        elif opts.tag_field_width:
            out.append(" " * opts.tag_field_width)
            out.append(" ")

        if opts.prefix_field_name in data:
            prefix = data[opts.prefix_field_name]
            text = str(prefix) if is_text_like(prefix) else type(prefix).__name__
        else:
            text = opts.prefix_field_name + MISSING_SUFFIX
        out.append(colors.prefix(text))
        width = len(text)

        if opts.func_field_name in data:
            text = str(data[opts.func_field_name])
            out.append(".")
            out.append(colors.func(text))
            width += len(text) + 1

        out.append(":")
        out.append(_padding(width + 1, opts.prefix_field_width))
        out.append(color(record.message))

        fields = self._trailing_fields(data)
        for n, (key, value) in enumerate(fields):
            out.append(" (" if n == 0 else " ")
            out.append(f"{colors.prefix(key)}={color(value)}")
        if fields:
            out.append(")")

        return "".join(out)

    def _trailing_fields(self, data: Mapping[str, Any]) -> list[tuple[str, str]]:
        """Return (key, rendered value) pairs: the error field first, then sorted keys."""
        fields: list[tuple[str, str]] = []
        if ERROR_KEY in data:
            fields.append((ERROR_KEY, _field_text(data[ERROR_KEY])))

        skip = self.reserved_keys | {ERROR_KEY}
        for key in sorted(k for k in data if k not in skip):
            fields.append((key, _field_text(data[key])))
        return fields

    def _format_plain(self, record: Record) -> str:
        opts = self.options
        data = prefix_field_clashes(record.data)
        pairs: list[tuple[str, str]] = []

        if not opts.disable_timestamp:
            pairs.append(("time", format_timestamp(record.time, opts.timestamp_format)))
        pairs.append(("level", record.level.canonical_name))
        if record.message:
            pairs.append(("msg", record.message))
        for key in sorted(data):
            pairs.append((key, _plain_value(data[key])))

        return " ".join(f"{key}={quote(value, opts.quote_character)}" for key, value in pairs)


class TextFormatterBuilder:
    """Fluent construction of a TextFormatter.

    Example:
        formatter = (
            TextFormatter.builder()
            .with_options(force_formatting=True, full_timestamp=True)
            .with_color_scheme(ColorScheme(info="green"))
            .build()
        )
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def with_options(self, **overrides: Any) -> "TextFormatterBuilder":
        self._values.update(overrides)
        return self

    def with_color_scheme(self, scheme: ColorScheme) -> "TextFormatterBuilder":
        self._values["color_scheme"] = scheme
        return self

    def build(self) -> TextFormatter:
        """Validate the collected options and build the formatter.

        Raises:
            pydantic.ValidationError: If an option has an invalid value.
            ColorSchemeError: If the color scheme cannot be compiled.
        """
        return TextFormatter(TextFormatterOptions(**self._values))


def prefix_field_clashes(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of data with keys the plain layout writes moved to ``fields.<key>``.

    The input mapping is left untouched.
    """
    fields = dict(data)
    for key in CLASHING_KEYS:
        if key in fields:
            fields[f"fields.{key}"] = fields.pop(key)
    return fields


def _padding(length: int, width: int) -> str:
    """Spaces bringing a column of ``length`` to ``width``, never fewer than one."""
    return " " * (max(width - length, 0) + 1)


def _field_text(value: Any) -> str:
    """Render a trailing field value; exceptions show as ``{message}``."""
    if isinstance(value, BaseException):
        return f"{{{error_text(value)}}}"
    return render_value(value)


def _plain_value(value: Any) -> str:
    if isinstance(value, BaseException):
        return error_text(value)
    return str(value)


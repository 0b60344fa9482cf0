"""Color schemes and their compiled form.

A ColorScheme names a style per semantic role; compiling it resolves every
role to a function that wraps text in that style's ANSI escape codes. Style
names use Rich's style grammar (``"bright_red"``, ``"bold cyan"``).
"""

from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel
from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from textformatter.errors import ColorSchemeError

ColorFunc = Callable[[str], str]

ROLES: tuple[str, ...] = (
    "debug",
    "info",
    "warn",
    "error",
    "fatal",
    "panic",
    "tag",
    "prefix",
    "func",
)


class ColorScheme(BaseModel):
    """Style name per role. An empty name selects the role's default style."""

    debug: str = ""
    info: str = ""
    warn: str = ""
    error: str = ""
    fatal: str = ""
    panic: str = ""
    tag: str = ""
    prefix: str = ""
    func: str = ""


@dataclass(frozen=True)
class CompiledColorScheme:
    """Resolved color function per role."""

    debug: ColorFunc
    info: ColorFunc
    warn: ColorFunc
    error: ColorFunc
    fatal: ColorFunc
    panic: ColorFunc
    tag: ColorFunc
    prefix: ColorFunc
    func: ColorFunc


DEFAULT_COLORS = ColorScheme(
    debug="bright_black",
    info="white",
    warn="bright_yellow",
    error="bright_red",
    fatal="bright_red",
    panic="bright_red",
    tag="magenta",
    prefix="cyan",
    func="bright_cyan",
)


def nocolor(text: str) -> str:
    return text


def style_func(style_name: str) -> ColorFunc:
    """Build a function wrapping text in the escape codes of a named style.

    Raises:
        StyleSyntaxError: If Rich cannot parse the style name.
    """
    style = Style.parse(style_name)

    def colorize(text: str) -> str:
        return style.render(text, color_system=ColorSystem.STANDARD)

    return colorize


def _compiled_color(role: str, main: str, fallback: str) -> ColorFunc:
    name = main or fallback
    try:
        return style_func(name)
    except StyleSyntaxError as exc:
        raise ColorSchemeError(role, name) from exc


def compile_color_scheme(scheme: ColorScheme) -> CompiledColorScheme:
    """Compile a scheme into color functions, falling back per role to DEFAULT_COLORS.

    The scheme is read once; later mutation of it does not affect the result.

    Args:
        scheme: The style names to compile.

    Returns:
        A CompiledColorScheme with one function per role.

    Raises:
        ColorSchemeError: If a style name cannot be parsed.
    """
    funcs = {
        role: _compiled_color(role, getattr(scheme, role), getattr(DEFAULT_COLORS, role))
        for role in ROLES
    }
    return CompiledColorScheme(**funcs)


NO_COLORS = CompiledColorScheme(**{role: nocolor for role in ROLES})

DEFAULT_COMPILED_SCHEME = compile_color_scheme(DEFAULT_COLORS)

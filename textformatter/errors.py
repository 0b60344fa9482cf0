"""Exceptions raised while configuring a formatter.

Formatting itself never raises; these only surface from build-time steps.
"""


class TextFormatterError(Exception):
    """Base class for formatter configuration errors."""


class ColorSchemeError(TextFormatterError):
    """Raised when a color scheme names a style that cannot be parsed."""

    def __init__(self, role: str, style: str) -> None:
        self.role = role
        self.style = style
        super().__init__(f"Invalid style {style!r} for color role: {role}")

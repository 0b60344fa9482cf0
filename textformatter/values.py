"""Field value dispatch.

Every field value falls into exactly one of three kinds, decided once per
value by a capability check:

* ERROR: an exception; rendered as its message.
* TEXTUAL: an object whose class defines its own ``__str__``; rendered
  with ``str()``.
* OPAQUE: anything else, including plain ``str`` and ``int``; rendered with
  ``repr()`` so strings show quoted and containers show their contents.
"""

import re
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """How a field value is rendered."""

    TEXTUAL = "textual"
    ERROR = "error"
    OPAQUE = "opaque"


_SAFE_TEXT = re.compile(r"[A-Za-z0-9_\-./@^+]+")


def classify(value: Any) -> ValueKind:
    if isinstance(value, BaseException):
        return ValueKind.ERROR
    if isinstance(value, str):
        return ValueKind.OPAQUE
    if type(value).__str__ is not object.__str__:
        return ValueKind.TEXTUAL
    return ValueKind.OPAQUE


def error_text(error: BaseException) -> str:
    """Return an exception's message, or its class name when the message is empty."""
    return str(error) or type(error).__name__


def render_value(value: Any) -> str:
    """Render a generic field value according to its ValueKind."""
    kind = classify(value)
    if kind is ValueKind.ERROR:
        return error_text(value)
    if kind is ValueKind.TEXTUAL:
        return str(value)
    return repr(value)


def is_text_like(value: Any) -> bool:
    """Return True for values with a string form: ``str`` or TEXTUAL kinds."""
    return isinstance(value, str) or classify(value) is ValueKind.TEXTUAL


def needs_quoting(text: str) -> bool:
    """Return True when text is empty or holds characters outside the safe set."""
    return _SAFE_TEXT.fullmatch(text) is None


def quote(text: str, char: str = '"') -> str:
    """Wrap text in the quote character when it needs quoting."""
    if needs_quoting(text):
        return f"{char}{text}{char}"
    return text

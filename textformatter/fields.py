"""Field value wrappers.

Values placed in a record's data render with ``repr()`` unless their class
defines ``__str__``. These wrappers give callers control over the rendered
text while deferring the work until a line is actually formatted.
"""

import operator
from typing import Any


class Formatted:
    """Renders ``template % args`` on demand."""

    def __init__(self, template: str, *args: Any) -> None:
        self.template = template
        self.args = args

    def __str__(self) -> str:
        return self.template % self.args

    def __repr__(self) -> str:
        return f"Formatted({self.template!r}, {', '.join(map(repr, self.args))})"


class HexBytes:
    """Renders bytes as ``[0A FF 10]``."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self.data = bytes(data)

    def __str__(self) -> str:
        return f"[{self.data.hex(' ').upper()}]"


class Money:
    """Renders an integer amount in minor units as a plain decimal.

    Raises:
        TypeError: If amount is not an integer.
    """

    def __init__(self, amount: int) -> None:
        self.amount = operator.index(amount)

    def __str__(self) -> str:
        return f"{self.amount:d}"


def fmt(template: str, *args: Any) -> Formatted:
    return Formatted(template, *args)


def hex_bytes(data: bytes | bytearray | memoryview) -> HexBytes:
    return HexBytes(data)


def money(amount: int) -> Money:
    return Money(amount)

"""Operation tags for correlating log lines.

A root tag is the creation time in nanoseconds, base 36. A child tag appends
the nanoseconds elapsed since its parent, so one operation and its sub-steps
share a common, sortable prefix:

    root = OpTag.new()            # "lw3x0k9s1a2b"
    step = OpTag.new(root)        # "lw3x0k9s1a2b 1f4k"

Tags are meant for the formatter's tag field.
"""

import time
from datetime import datetime, timezone

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def base36(value: int) -> str:
    """Render an integer in base 36 with lowercase digits."""
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_DIGITS[rem])
    return sign + "".join(reversed(digits))


class OpTag:
    """An operation tag with its creation time."""

    def __init__(self, time_ns: int, text: str) -> None:
        self.time_ns = time_ns
        self.text = text

    @classmethod
    def new(cls, parent: "OpTag | None" = None) -> "OpTag":
        """Create a root tag, or a child of ``parent``."""
        now = time.time_ns()
        if parent is None:
            return cls(now, base36(now))
        return cls(now, f"{parent.text} {base36(now - parent.time_ns)}")

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(self.time_ns / 1e9, tz=timezone.utc)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"OpTag({self.text!r})"

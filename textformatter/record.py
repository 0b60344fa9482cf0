"""The log record handed to the formatter."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from textformatter.levels import Level

ERROR_KEY = "error"


@dataclass
class Record:
    """One structured log event.

    Attributes:
        level: Severity of the event.
        time: When the event happened.
        message: Free-form message text.
        data: Named fields. Iteration order carries no meaning.
        buffer: Optional pre-allocated output buffer; output is appended to it.
        output: The sink the line is destined for, queried for terminal support.
    """

    level: Level
    time: datetime
    message: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    buffer: bytearray | None = None
    output: Any = None

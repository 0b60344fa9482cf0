"""Terminal detection for output sinks."""

from typing import Any


def is_terminal(stream: Any) -> bool:
    """Report whether a sink is an interactive terminal.

    Sinks without ``isatty`` (buffers, sockets wrappers, None) are not
    terminals. Closed streams are not terminals either.
    """
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False

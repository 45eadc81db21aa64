"""Text rendering helpers for log lines and error messages.

Example:
    >>> from ircprims.utils.text import preview
    >>> preview(memoryview(b"PRIVMSG #chan :hello"), limit=7)
    "b'PRIVMSG'..."
"""

from __future__ import annotations

from ircprims.view import ByteView


def preview(view: ByteView, limit: int = 16) -> str:
    """Render at most ``limit`` bytes of ``view`` for humans.

    Uses the ``bytes`` repr so control bytes such as CR and NUL stay
    visible. Truncation is marked with a trailing ``...``.

    Args:
        view: Bytes to render (any bytes-like object works)
        limit: Maximum number of bytes shown

    Returns:
        ``"end of input"`` for an empty view, otherwise the repr

    Examples:
        >>> preview(memoryview(b""))
        'end of input'
        >>> preview(memoryview(b"abcdef"), limit=3)
        "b'abc'..."
    """
    if not len(view):
        return "end of input"
    shown = repr(bytes(view[:limit]))
    if len(view) > limit:
        shown += "..."
    return shown

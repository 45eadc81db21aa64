"""Non-owning byte views.

Every rule in ircprims reads its input through a ``memoryview`` with the
unsigned-byte format. Slicing a memoryview never copies, so the consumed
prefix and the remainder returned by a rule are windows onto the caller's
buffer.

Ownership:
    A view must not outlive its backing buffer, and the buffer must not be
    mutated while any view over it exists. ``bytes`` buffers satisfy this
    trivially; a ``bytearray`` cannot be resized while a view is exported.

Example:
    >>> from ircprims.view import as_view
    >>> view = as_view(b"NICK foo")
    >>> bytes(view[:4])
    b'NICK'
    >>> view[:4].obj is view.obj
    True

"""

from __future__ import annotations

from typing import TypeAlias

ByteView: TypeAlias = memoryview

# Anything a rule will accept as input
ByteLike: TypeAlias = bytes | bytearray | memoryview


def as_view(data: ByteLike) -> ByteView:
    """Wrap ``data`` in a one-dimensional unsigned-byte memoryview.

    A memoryview that already has that shape is returned unchanged, so
    re-wrapping a rule's remainder costs nothing.

    Args:
        data: bytes, bytearray or memoryview

    Returns:
        A ``memoryview`` with format ``"B"``

    Raises:
        TypeError: If ``data`` is not a bytes-like buffer (``str`` included;
            encoding is the caller's business).
    """
    if isinstance(data, memoryview):
        if data.format == "B" and data.ndim == 1:
            return data
        return data.cast("B")
    if isinstance(data, (bytes, bytearray)):
        return memoryview(data)
    raise TypeError(
        f"expected bytes, bytearray or memoryview, got {type(data).__name__}"
    )


def view_offset(view: ByteView, base: ByteView) -> int:
    """Return how far the remainder ``view`` starts into ``base``.

    ``view`` must be a remainder derived from ``base``, which is what a
    chain of rule applications produces. The result is the number of bytes
    consumed between the two, handy for error positions.

    A memoryview does not expose where it starts, so only the buffer, the
    length and the content are checked: a prefix or middle slice whose
    bytes happen to equal the tail of ``base`` is not detected.

    Raises:
        ValueError: If the views do not share a buffer, ``view`` is longer
            than ``base``, or its bytes differ from the tail of ``base``.
    """
    if view.obj is not base.obj:
        raise ValueError("views do not share an underlying buffer")
    offset = len(base) - len(view)
    if offset < 0 or base[offset:] != view:
        raise ValueError("view is not a suffix of base")
    return offset


__all__ = ["ByteLike", "ByteView", "as_view", "view_offset"]

"""Byte sinks for rendered HTML.

The writer accepts any object with a ``write(bytes)`` method: binary files,
``io.BytesIO``, ``sys.stdout.buffer``, socket files. BufferSink is the
in-memory sink used by the string-returning render helpers.

Adopts the StringBuilder pattern: appends to a list, joins once at the end,
O(n) total vs O(n²) for repeated concatenation.

Thread Safety:
BufferSink instances are local to each render call.
No shared mutable state.

"""

from __future__ import annotations

from typing import Protocol


class Sink(Protocol):
    """Destination accepting raw bytes."""

    def write(self, data: bytes, /) -> object: ...


class BufferSink:
    """Efficient in-memory byte accumulator.

    Usage:
            >>> sink = BufferSink()
            >>> sink.write(b"<p>")
            >>> sink.write(b"hi")
            >>> sink.write(b"</p>")
            >>> sink.getvalue()
            '<p>hi</p>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty BufferSink."""
        self._parts: list[bytes] = []

    def write(self, data: bytes) -> None:
        """Append bytes (empty writes are skipped)."""
        if data:
            self._parts.append(data)

    def build(self) -> bytes:
        """Join all parts into the final byte string."""
        return b"".join(self._parts)

    def getvalue(self) -> str:
        """Joined output decoded as UTF-8."""
        return self.build().decode("utf-8")

    def clear(self) -> None:
        self._parts.clear()

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been written."""
        return bool(self._parts)

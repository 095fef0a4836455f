"""Byte-level packing and unpacking utilities.

This module provides the sink and source used by the record codec.
All multi-byte integers are unsigned and little-endian.
"""

from __future__ import annotations

from ..exceptions import TruncatedInputError


class ByteWriter:
    """Appends fixed-width values to a growing byte buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_uint(1, 1)
        >>> writer.write_uint(0xCCA1, 2)
        >>> writer.write_zeros(2)
        >>> writer.to_bytes()
        b'\\x01\\xa1\\xcc\\x00\\x00'
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_uint(self, value: int, size: int) -> None:
        """Write an unsigned integer using `size` bytes, little-endian.

        Args:
            value: Unsigned integer value to write
            size: Number of bytes (1-8)

        Raises:
            ValueError: If the value does not fit in `size` bytes
        """
        if size < 1 or size > 8:
            raise ValueError(f"size must be 1-8, got {size}")
        if value < 0 or value >= 1 << (8 * size):
            raise ValueError(f"Value {value} does not fit in {size} unsigned bytes")

        self._buffer.extend(value.to_bytes(size, "little"))

    def write_zeros(self, count: int) -> None:
        """Write `count` zero bytes."""
        self._buffer.extend(bytes(count))

    def set_byte(self, offset: int, value: int) -> None:
        """Overwrite one already written byte."""
        self._buffer[offset] = value

    def to_bytes(self) -> bytes:
        """Return the written bytes."""
        return bytes(self._buffer)


class ByteReader:
    """Consumes fixed-width values from a bytes-like object.

    Reading never goes past the end of the data: an attempt to do so
    raises TruncatedInputError and leaves the cursor unchanged.
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        """Initialize a reader positioned at offset 0.

        Args:
            data: Bytes to read from
        """
        self._data = bytes(data)
        self._position = 0

    @property
    def position(self) -> int:
        """Current cursor offset."""
        return self._position

    @property
    def remaining(self) -> int:
        """Number of bytes not yet consumed."""
        return len(self._data) - self._position

    def _take(self, count: int) -> bytes:
        if count > self.remaining:
            raise TruncatedInputError(self._position + count, len(self._data))
        chunk = self._data[self._position : self._position + count]
        self._position += count
        return chunk

    def read_uint(self, size: int) -> int:
        """Read an unsigned little-endian integer of `size` bytes."""
        return int.from_bytes(self._take(size), "little")

    def skip(self, count: int) -> None:
        """Advance the cursor by `count` bytes without decoding them."""
        self._take(count)

    def consumed(self) -> bytes:
        """Return every byte read so far, i.e. [0, position)."""
        return self._data[: self._position]

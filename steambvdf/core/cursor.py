# steambvdf/core/cursor.py

"""Byte cursor with the primitive readers of the binary VDF format.

All multi-byte values are little-endian. Every read checks the remaining
length first and raises ``OutOfDataError`` without moving the cursor.
"""

from __future__ import annotations

import struct

from steambvdf.core.errors import OutOfDataError

__all__ = ["ByteCursor"]

_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")
_U64 = struct.Struct("<Q")
_F32 = struct.Struct("<f")


class ByteCursor:
    """
    Read position over an immutable byte buffer.

    A cursor belongs to exactly one parse call. The offset only moves
    forward and never passes the end of the buffer.

    Attributes:
        data (bytes): The buffer being read.
        offset (int): Current read position.
    """

    def __init__(self, data: bytes | bytearray | memoryview, offset: int = 0):
        """
        Initializes the cursor.

        Args:
            data (bytes | bytearray | memoryview): Buffer to read. Mutable
                buffers are copied so later changes cannot affect the parse.
            offset (int): Starting position. Defaults to 0.

        Raises:
            ValueError: If ``offset`` lies outside the buffer.
        """
        self.data = bytes(data)
        if not 0 <= offset <= len(self.data):
            raise ValueError(f"Offset {offset} outside buffer of {len(self.data)} bytes")
        self.offset = offset

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self.data) - self.offset

    @property
    def at_end(self) -> bool:
        """True when every byte has been consumed."""
        return self.offset >= len(self.data)

    def _require(self, size: int) -> None:
        if self.remaining < size:
            raise OutOfDataError(self.offset, size, self.remaining)

    # ===== READ PRIMITIVES =====

    def read_u8(self) -> int:
        """Reads an unsigned byte."""
        self._require(1)
        value = self.data[self.offset]
        self.offset += 1
        return value

    def read_u32(self) -> int:
        """Reads an unsigned 32-bit integer."""
        self._require(4)
        value = _U32.unpack_from(self.data, self.offset)[0]
        self.offset += 4
        return value

    def read_i32(self) -> int:
        """Reads a signed 32-bit integer."""
        self._require(4)
        value = _I32.unpack_from(self.data, self.offset)[0]
        self.offset += 4
        return value

    def read_u64(self) -> int:
        """Reads an unsigned 64-bit integer."""
        self._require(8)
        value = _U64.unpack_from(self.data, self.offset)[0]
        self.offset += 8
        return value

    def read_f32(self) -> float:
        """Reads a 32-bit IEEE-754 float."""
        self._require(4)
        value = _F32.unpack_from(self.data, self.offset)[0]
        self.offset += 4
        return value

    def read_bytes(self, size: int) -> bytes:
        """Reads ``size`` raw bytes."""
        self._require(size)
        value = self.data[self.offset:self.offset + size]
        self.offset += size
        return value

    def skip(self, size: int) -> None:
        """Advances past ``size`` bytes without decoding them."""
        self._require(size)
        self.offset += size

    def read_cstring(self) -> str:
        """
        Reads a null-terminated UTF-8 string.

        Invalid UTF-8 sequences are replaced rather than rejected; Steam
        files are known to contain a few of them.

        Returns:
            str: The decoded string without its terminator.

        Raises:
            OutOfDataError: If no terminator exists before the end of the
                buffer. The error points at the start of the string.
        """
        end = self.data.find(b"\x00", self.offset)
        if end == -1:
            raise OutOfDataError(self.offset, None, self.remaining)

        value = self.data[self.offset:end].decode("utf-8", errors="replace")
        self.offset = end + 1
        return value

    def __repr__(self) -> str:
        return f"<ByteCursor offset={self.offset} size={len(self.data)}>"

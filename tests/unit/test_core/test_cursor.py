"""Tests for ByteCursor primitive readers."""

from __future__ import annotations

import struct

import pytest

from steambvdf.core.cursor import ByteCursor
from steambvdf.core.errors import OutOfDataError


class TestFixedWidthReads:
    """Tests for the little-endian integer and float readers."""

    def test_read_u8(self) -> None:
        """Single byte is returned unsigned and advances by one."""
        cursor = ByteCursor(b"\xff\x01")
        assert cursor.read_u8() == 255
        assert cursor.offset == 1

    def test_read_u32_little_endian(self) -> None:
        """Bytes 01 02 03 04 decode to 0x04030201."""
        cursor = ByteCursor(b"\x01\x02\x03\x04")
        assert cursor.read_u32() == 0x04030201
        assert cursor.offset == 4

    def test_read_i32_negative(self) -> None:
        """All-ones dword decodes as -1 when signed."""
        cursor = ByteCursor(b"\xff\xff\xff\xff")
        assert cursor.read_i32() == -1

    def test_read_u64(self) -> None:
        """64-bit values keep the full unsigned range."""
        cursor = ByteCursor(struct.pack("<Q", 2**64 - 1))
        assert cursor.read_u64() == 2**64 - 1
        assert cursor.offset == 8

    def test_read_f32(self) -> None:
        """IEEE-754 single precision float."""
        cursor = ByteCursor(struct.pack("<f", 1.5))
        assert cursor.read_f32() == 1.5

    def test_sequential_reads_advance(self) -> None:
        """Mixed reads consume exactly their widths."""
        cursor = ByteCursor(b"\x07" + struct.pack("<I", 9) + struct.pack("<Q", 10))
        assert cursor.read_u8() == 7
        assert cursor.read_u32() == 9
        assert cursor.read_u64() == 10
        assert cursor.at_end

    @pytest.mark.parametrize(
        ("method", "size"),
        [("read_u32", 4), ("read_i32", 4), ("read_f32", 4), ("read_u64", 8)],
    )
    def test_short_read_raises_without_moving(self, method: str, size: int) -> None:
        """Too few bytes raise OutOfDataError and leave the offset alone."""
        cursor = ByteCursor(b"\x00" * (size - 1))
        with pytest.raises(OutOfDataError) as exc_info:
            getattr(cursor, method)()
        assert exc_info.value.offset == 0
        assert exc_info.value.needed == size
        assert exc_info.value.available == size - 1
        assert cursor.offset == 0

    def test_read_u8_at_end(self) -> None:
        """Reading past the end of an empty buffer fails."""
        with pytest.raises(OutOfDataError):
            ByteCursor(b"").read_u8()


class TestReadCString:
    """Tests for null-terminated string decoding."""

    def test_simple_string(self) -> None:
        """String and terminator are consumed."""
        cursor = ByteCursor(b"appinfo\x00rest")
        assert cursor.read_cstring() == "appinfo"
        assert cursor.offset == 8

    def test_empty_string(self) -> None:
        """A lone terminator is an empty string of one byte."""
        cursor = ByteCursor(b"\x00")
        assert cursor.read_cstring() == ""
        assert cursor.offset == 1

    def test_utf8_multibyte(self) -> None:
        """Multi-byte UTF-8 is decoded."""
        cursor = ByteCursor("Pokémon ☆\x00".encode("utf-8"))
        assert cursor.read_cstring() == "Pokémon ☆"

    def test_invalid_utf8_is_replaced(self) -> None:
        """Broken sequences are replaced instead of aborting the parse."""
        cursor = ByteCursor(b"ab\xffcd\x00")
        assert cursor.read_cstring() == "ab�cd"
        assert cursor.at_end

    def test_unterminated_string_reports_start_offset(self) -> None:
        """Missing terminator raises OutOfDataError at the string start."""
        cursor = ByteCursor(b"ok\x00unterminated")
        cursor.read_cstring()
        with pytest.raises(OutOfDataError) as exc_info:
            cursor.read_cstring()
        assert exc_info.value.offset == 3
        assert exc_info.value.needed is None
        assert exc_info.value.available == len(b"unterminated")
        assert cursor.offset == 3


class TestCursorState:
    """Tests for skip, read_bytes and bookkeeping."""

    def test_skip_and_remaining(self) -> None:
        """skip() advances and remaining tracks the rest."""
        cursor = ByteCursor(b"\x00" * 10)
        cursor.skip(4)
        assert cursor.offset == 4
        assert cursor.remaining == 6
        assert not cursor.at_end

    def test_skip_past_end_raises(self) -> None:
        """Skipping more than is left fails."""
        cursor = ByteCursor(b"\x00" * 3)
        with pytest.raises(OutOfDataError):
            cursor.skip(4)

    def test_read_bytes(self) -> None:
        """Raw bytes come back unchanged."""
        cursor = ByteCursor(b"\x01\x02\x03")
        assert cursor.read_bytes(2) == b"\x01\x02"
        assert cursor.remaining == 1

    def test_start_offset(self) -> None:
        """A cursor can start inside the buffer."""
        cursor = ByteCursor(b"\xaa\xbb\x05", offset=2)
        assert cursor.read_u8() == 5

    def test_start_offset_out_of_range(self) -> None:
        """Offsets outside the buffer are rejected."""
        with pytest.raises(ValueError):
            ByteCursor(b"\x00", offset=5)

    def test_mutable_buffer_is_snapshotted(self) -> None:
        """Changing a bytearray after construction does not affect reads."""
        data = bytearray(b"\x01")
        cursor = ByteCursor(data)
        data[0] = 0x02
        assert cursor.read_u8() == 1

# steambvdf/core/header.py

"""File header shared by appinfo.vdf and packageinfo.vdf."""

from __future__ import annotations

from dataclasses import dataclass

from steambvdf.core.constants import HEADER_SIZE, EUniverse
from steambvdf.core.cursor import ByteCursor
from steambvdf.core.errors import InvalidSignatureError, OutOfDataError

__all__ = ["BinaryHeader", "read_header"]


@dataclass(frozen=True)
class BinaryHeader:
    """Decoded file header.

    Attributes:
        signature: First byte. Varies between Steam client versions and is
            not validated.
        magic: The two magic bytes (``DV`` for appinfo, ``UV`` for packageinfo).
        universe: Steam universe the file belongs to.
    """

    signature: int
    magic: bytes
    universe: int

    @property
    def universe_name(self) -> str:
        """Name of the universe, or its number if Steam added a new one."""
        try:
            return EUniverse(self.universe).name
        except ValueError:
            return str(self.universe)


def read_header(cursor: ByteCursor, magic: bytes) -> BinaryHeader:
    """Reads and validates the 7-byte header.

    Args:
        cursor: Cursor at the start of the file.
        magic: Expected bytes at offsets 1-2.

    Returns:
        The decoded header.

    Raises:
        InvalidSignatureError: If the magic bytes do not match.
        OutOfDataError: If the buffer is shorter than the header.
    """
    if cursor.remaining < HEADER_SIZE:
        raise OutOfDataError(cursor.offset, HEADER_SIZE, cursor.remaining)

    signature = cursor.read_u8()
    magic_offset = cursor.offset
    found = cursor.read_bytes(len(magic))
    if found != magic:
        raise InvalidSignatureError(magic_offset, magic, found)

    universe = cursor.read_u32()
    return BinaryHeader(signature=signature, magic=found, universe=universe)

# steambvdf/core/errors.py

"""Exceptions raised by the binary VDF codec.

Every error carries the byte offset it refers to and the values that were
expected or found, so callers can branch on the exception type and still
produce a precise message.
"""

from __future__ import annotations

__all__ = [
    "BVDFError",
    "EncodeError",
    "InvalidSignatureError",
    "MaxDepthExceededError",
    "OutOfDataError",
    "UnknownEntryTypeError",
]


class BVDFError(ValueError):
    """Base class for all binary VDF errors.

    Attributes:
        offset (int | None): Byte offset in the buffer the error refers to.
    """

    def __init__(self, message: str, offset: int | None = None):
        """
        Initializes the exception.

        Args:
            message (str): Human-readable description.
            offset (int | None): Byte offset the error refers to, if known.
        """
        self.offset = offset
        super().__init__(message)


class OutOfDataError(BVDFError):
    """
    Raised when fewer bytes remain than a read requires.

    Attributes:
        offset (int): Offset at which the read started.
        needed (int | None): Number of bytes the read required. ``None`` for
            null-terminated strings, where the length is not known up front.
        available (int): Number of bytes left at ``offset``.
    """

    def __init__(self, offset: int, needed: int | None, available: int):
        """
        Initializes the exception.

        Args:
            offset (int): Offset at which the read started.
            needed (int | None): Bytes required, or ``None`` for unterminated strings.
            available (int): Bytes remaining at ``offset``.
        """
        self.needed = needed
        self.available = available
        if needed is None:
            message = f"Unterminated string at offset {offset} ({available} bytes left)"
        else:
            message = f"Out of data at offset {offset}: need {needed} bytes, {available} available"
        super().__init__(message, offset)


class InvalidSignatureError(BVDFError):
    """
    Raised when a file header does not carry the expected magic bytes.

    Attributes:
        offset (int): Offset of the magic bytes.
        expected (bytes): The magic that was expected.
        found (bytes): The bytes actually present.
    """

    def __init__(self, offset: int, expected: bytes, found: bytes):
        self.expected = expected
        self.found = found
        super().__init__(
            f"Invalid file signature at offset {offset}: expected {expected.hex(' ')}, found {found.hex(' ')}",
            offset,
        )


class UnknownEntryTypeError(BVDFError):
    """
    Raised when a KV tree contains a type tag outside 0x00-0x08.

    Attributes:
        offset (int): Offset of the type tag.
        tag (int): The unrecognized tag value.
    """

    def __init__(self, offset: int, tag: int):
        self.tag = tag
        super().__init__(f"Unknown entry type 0x{tag:02x} at offset {offset}", offset)


class MaxDepthExceededError(BVDFError):
    """
    Raised when nested maps go deeper than the configured limit.

    Attributes:
        offset (int): Offset of the nested entry that crossed the limit.
        max_depth (int): The limit in effect.
    """

    def __init__(self, offset: int, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Nesting deeper than {max_depth} levels at offset {offset}", offset)


class EncodeError(BVDFError):
    """
    Raised when a value has no binary VDF representation.

    Attributes:
        key (str): Key of the offending entry.
        value (object): The value that could not be encoded.
    """

    def __init__(self, key: str, value: object):
        self.key = key
        self.value = value
        super().__init__(f"Cannot encode {type(value).__name__} value for key {key!r}")

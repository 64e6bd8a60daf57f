# steambvdf/core/binary_kv.py

"""Binary key/value (binary VDF) decoder and encoder.

Every entry on the wire is::

    type_tag: u8
    key:      null-terminated string
    payload:  depends on type_tag

A tree is a run of entries closed by an ``END`` (0x08) tag. Nested maps
have no length prefix, so the decoder walks the buffer entry by entry and
reports how many bytes each tree consumed.

Decoded values keep their wire type: Pointer, Color and UInt64 payloads
come back as the ``vdf`` library's ``POINTER``, ``COLOR`` and ``UINT_64``
int subclasses, which compare equal to plain ints and let the encoder
write the same tag back.
"""

from __future__ import annotations

import logging
import struct
from collections.abc import Mapping
from typing import Union

import vdf

from steambvdf.core.constants import MAX_DEPTH, EntryType
from steambvdf.core.cursor import ByteCursor
from steambvdf.core.errors import (
    BVDFError,
    EncodeError,
    MaxDepthExceededError,
    UnknownEntryTypeError,
)

__all__ = [
    "KVMap",
    "KVValue",
    "decode_kv_entry",
    "decode_kv_tree",
    "encode_kv_tree",
    "read_kv_tree",
]

logger = logging.getLogger("steambvdf.binary_kv")

KVValue = Union["KVMap", str, int, float]
KVMap = dict[str, KVValue]

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT64_MAX = 2**64 - 1


# ===== DECODING =====


def _read_tag(cursor: ByteCursor) -> EntryType:
    tag_offset = cursor.offset
    tag = cursor.read_u8()
    try:
        return EntryType(tag)
    except ValueError:
        raise UnknownEntryTypeError(tag_offset, tag) from None


def _read_payload(cursor: ByteCursor, tag: EntryType, depth: int, max_depth: int) -> KVValue:
    """Reads the payload that follows a key, dispatching on its tag."""
    if tag == EntryType.NESTED:
        return read_kv_tree(cursor, depth=depth + 1, max_depth=max_depth)
    if tag in (EntryType.STRING, EntryType.WIDESTRING):
        return cursor.read_cstring()
    if tag == EntryType.INT32:
        return cursor.read_i32()
    if tag == EntryType.FLOAT32:
        return cursor.read_f32()
    if tag == EntryType.POINTER:
        return vdf.POINTER(cursor.read_i32())
    if tag == EntryType.COLOR:
        return vdf.COLOR(cursor.read_i32())
    if tag == EntryType.UINT64:
        return vdf.UINT_64(cursor.read_u64())

    # END never reaches here; the callers handle it
    raise BVDFError(f"Entry type {tag.name} has no payload", cursor.offset)


def read_kv_tree(cursor: ByteCursor, depth: int = 0, max_depth: int = MAX_DEPTH) -> KVMap:
    """
    Reads entries from ``cursor`` up to and including the next END tag.

    Later duplicates of a key overwrite earlier ones; the key keeps its
    first position.

    Args:
        cursor (ByteCursor): Cursor positioned at the first type tag.
        depth (int): Nesting level of this tree. 0 for a top-level tree.
        max_depth (int): Deepest nesting level accepted.

    Returns:
        KVMap: The decoded entries in file order.

    Raises:
        OutOfDataError: If the buffer ends before the END tag.
        UnknownEntryTypeError: If a tag outside 0x00-0x08 is found.
        MaxDepthExceededError: If nesting goes past ``max_depth``.
    """
    if depth > max_depth:
        raise MaxDepthExceededError(cursor.offset, max_depth)

    tree: KVMap = {}

    while True:
        tag = _read_tag(cursor)
        if tag == EntryType.END:
            return tree

        key = cursor.read_cstring()
        tree[key] = _read_payload(cursor, tag, depth, max_depth)


def decode_kv_tree(
        buffer: bytes | bytearray | memoryview,
        offset: int = 0,
        *,
        max_depth: int = MAX_DEPTH,
) -> tuple[KVMap, int]:
    """
    Decodes one KV tree starting at ``offset``.

    Args:
        buffer: Raw bytes holding the tree.
        offset (int): Position of the first type tag. Defaults to 0.
        max_depth (int): Deepest nesting level accepted.

    Returns:
        tuple[KVMap, int]: The decoded map and the number of bytes consumed,
        counting the closing END tag.
    """
    cursor = ByteCursor(buffer, offset)
    tree = read_kv_tree(cursor, max_depth=max_depth)
    return tree, cursor.offset - offset


def decode_kv_entry(
        buffer: bytes | bytearray | memoryview,
        offset: int = 0,
        *,
        max_depth: int = MAX_DEPTH,
) -> tuple[str, KVValue, int]:
    """
    Decodes the single entry starting at ``offset``.

    Returns:
        tuple[str, KVValue, int]: Key, value and bytes consumed (tag, key and
        payload).

    Raises:
        BVDFError: If the tag at ``offset`` is END, which closes a tree
            rather than starting an entry.
    """
    cursor = ByteCursor(buffer, offset)
    tag = _read_tag(cursor)
    if tag == EntryType.END:
        raise BVDFError(f"End marker at offset {offset} is not an entry", offset)

    key = cursor.read_cstring()
    value = _read_payload(cursor, tag, 0, max_depth)
    return key, value, cursor.offset - offset


# ===== ENCODING =====


def _encode_cstring(string: str) -> bytes:
    return string.encode("utf-8") + b"\x00"


def _encode_entry(output: bytearray, key: str, value: object) -> None:
    """Appends one tagged entry to ``output``."""
    if isinstance(value, Mapping):
        output.append(EntryType.NESTED)
        output.extend(_encode_cstring(key))
        _encode_tree(output, value)

    elif isinstance(value, (list, tuple)):
        # Steam stores arrays as maps keyed "0", "1", ...
        output.append(EntryType.NESTED)
        output.extend(_encode_cstring(key))
        _encode_tree(output, {str(index): item for index, item in enumerate(value)})

    elif isinstance(value, str):
        output.append(EntryType.STRING)
        output.extend(_encode_cstring(key))
        output.extend(_encode_cstring(value))

    elif isinstance(value, (vdf.POINTER, vdf.COLOR)):
        tag = EntryType.POINTER if isinstance(value, vdf.POINTER) else EntryType.COLOR
        output.append(tag)
        output.extend(_encode_cstring(key))
        output.extend(struct.pack("<i", value))

    elif isinstance(value, vdf.UINT_64):
        output.append(EntryType.UINT64)
        output.extend(_encode_cstring(key))
        output.extend(struct.pack("<Q", value))

    elif isinstance(value, float):
        output.append(EntryType.FLOAT32)
        output.extend(_encode_cstring(key))
        output.extend(struct.pack("<f", value))

    elif isinstance(value, int):
        if _INT32_MIN <= value <= _INT32_MAX:
            output.append(EntryType.INT32)
            output.extend(_encode_cstring(key))
            output.extend(struct.pack("<i", int(value)))
        elif 0 <= value <= _UINT64_MAX:
            output.append(EntryType.UINT64)
            output.extend(_encode_cstring(key))
            output.extend(struct.pack("<Q", value))
        else:
            raise EncodeError(key, value)

    else:
        raise EncodeError(key, value)


def _encode_tree(output: bytearray, mapping: Mapping[str, object]) -> None:
    for key, value in mapping.items():
        _encode_entry(output, str(key), value)
    output.append(EntryType.END)


def encode_kv_tree(mapping: Mapping[str, object]) -> bytes:
    """
    Encodes a mapping as a KV tree, END tag included.

    ``bool`` values are written as Int32 0/1 and lists as index-keyed
    nested maps. Plain ints use Int32 when they fit and UInt64 otherwise.

    Args:
        mapping (Mapping[str, object]): The tree to encode.

    Returns:
        bytes: The encoded tree.

    Raises:
        EncodeError: If a value has no binary representation.
    """
    output = bytearray()
    _encode_tree(output, mapping)
    logger.debug("Encoded KV tree with %d top-level keys (%d bytes)", len(mapping), len(output))
    return bytes(output)

# steambvdf/core/appinfo_parser.py

"""Parser for Steam's binary appinfo.vdf.

Layout::

    header   7 bytes   signature byte, magic "DV", u32 universe
    record   u32 app id (0 ends the file)
             skip region (size, state, last update, token, SHA-1, ...)
             KV tree
    ...
    u32 0

The skip region is 49 bytes by default. Older parsers used 48 bytes for
every record after the first, so both counts can be overridden.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from steambvdf.core.binary_kv import KVMap, read_kv_tree
from steambvdf.core.constants import (
    APPINFO_MAGIC,
    APPINFO_RECORD_NAME,
    APPINFO_SENTINEL,
    APPINFO_SKIP_BYTES,
    MAX_DEPTH,
    TEMPLATE_INDEX_KEY,
)
from steambvdf.core.cursor import ByteCursor
from steambvdf.core.header import read_header

__all__ = ["AppInfoRecord", "fix_signed_template_index", "parse_appinfo"]

logger = logging.getLogger("steambvdf.appinfo")


@dataclass(frozen=True)
class AppInfoRecord:
    """One application entry of appinfo.vdf.

    Attributes:
        id: App id from the record header.
        name: Record-level section name (always ``"appinfo"``), not the
            game's display name.
        entries: Decoded key/value tree.
    """

    id: int
    name: str = APPINFO_RECORD_NAME
    entries: KVMap = field(default_factory=dict)

    @property
    def common(self) -> KVMap:
        """The ``common`` section, or an empty map."""
        common = self.entries.get("common")
        return common if isinstance(common, dict) else {}


def fix_signed_template_index(value: int) -> int:
    """Reinterprets a sign-extended template index as unsigned 32-bit.

    Steam writes ``config.steamcontrollertemplateindex`` with the sign bit
    set for large values, so they decode as small negatives.

    Args:
        value: The decoded Int32.

    Returns:
        ``value + 2**32`` if negative, otherwise ``value`` unchanged.
    """
    if value < 0:
        return value + 2**32
    return value


def _apply_sign_fix(entries: KVMap) -> None:
    section_key, value_key = TEMPLATE_INDEX_KEY
    section = entries.get(section_key)
    if not isinstance(section, dict):
        return

    value = section.get(value_key)
    if isinstance(value, int) and not isinstance(value, bool) and value < 0:
        section[value_key] = fix_signed_template_index(value)
        logger.debug("Fixed sign of %s.%s: %d", section_key, value_key, value)


def parse_appinfo(
        buffer: bytes | bytearray | memoryview,
        *,
        skip_bytes: int = APPINFO_SKIP_BYTES,
        next_skip_bytes: int | None = None,
        max_depth: int = MAX_DEPTH,
) -> list[AppInfoRecord]:
    """
    Parses an appinfo.vdf buffer.

    Reading stops at the zero app id or when the buffer ends exactly on a
    record boundary.

    Args:
        buffer: Complete file contents.
        skip_bytes (int): Bytes skipped after the first app id.
        next_skip_bytes (int | None): Bytes skipped after every later app
            id. ``None`` uses ``skip_bytes``.
        max_depth (int): Deepest nesting accepted inside a record.

    Returns:
        list[AppInfoRecord]: Records in file order.

    Raises:
        InvalidSignatureError: If the magic bytes are not ``44 56``.
        OutOfDataError: If the buffer ends inside a record.
        UnknownEntryTypeError: If a record holds an unknown type tag.
        MaxDepthExceededError: If a record nests deeper than ``max_depth``.
    """
    if next_skip_bytes is None:
        next_skip_bytes = skip_bytes

    cursor = ByteCursor(buffer)
    header = read_header(cursor, APPINFO_MAGIC)

    records: list[AppInfoRecord] = []

    while not cursor.at_end:
        app_id = cursor.read_u32()
        if app_id == APPINFO_SENTINEL:
            break

        cursor.skip(next_skip_bytes if records else skip_bytes)

        entries = read_kv_tree(cursor, max_depth=max_depth)
        _apply_sign_fix(entries)

        records.append(AppInfoRecord(id=app_id, entries=entries))

    logger.debug("Parsed %d apps (universe %s, %d bytes)", len(records), header.universe_name, cursor.offset)
    return records

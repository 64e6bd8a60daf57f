# steambvdf/core/packageinfo_parser.py

"""Parser for Steam's binary packageinfo.vdf.

Steam stores license/package data in ``appcache/packageinfo.vdf``. Each
record is a package id, a 20-byte SHA-1, a change number and one KV tree.
The record list ends with ``0xFFFFFFFF``, but not every file has it, so
running out of data inside a record ends the stream instead of failing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from steambvdf.core.binary_kv import KVMap, read_kv_tree
from steambvdf.core.constants import MAX_DEPTH, PACKAGEINFO_MAGIC, PACKAGEINFO_SENTINEL, SHA1_SIZE
from steambvdf.core.cursor import ByteCursor
from steambvdf.core.errors import OutOfDataError
from steambvdf.core.header import read_header

__all__ = ["PackageInfoRecord", "parse_packageinfo"]

logger = logging.getLogger("steambvdf.packageinfo")


@dataclass(frozen=True)
class PackageInfoRecord:
    """One package entry of packageinfo.vdf.

    Attributes:
        id: Package id from the record header.
        entries: Decoded key/value tree.
        change_number: PICS change number of the record.
        sha1: Raw SHA-1 of the record.
    """

    id: int
    entries: KVMap = field(default_factory=dict)
    change_number: int = 0
    sha1: bytes = b""

    @property
    def section(self) -> KVMap:
        """The package's own key/value map.

        Steam wraps each package tree in one outer key named after the
        package id. That wrapper is removed; unwrapped trees are returned
        as they are.
        """
        if len(self.entries) == 1:
            inner = next(iter(self.entries.values()))
            if isinstance(inner, dict):
                return inner
        return self.entries

    @property
    def package_id(self) -> int:
        """``packageid`` from the package section when present, else the header id."""
        value = self.section.get("packageid")
        if isinstance(value, int):
            return int(value)
        return self.id

    @property
    def app_ids(self) -> list[int]:
        """App ids granted by this package."""
        appids = self.section.get("appids")
        if not isinstance(appids, dict):
            return []
        return [int(v) for v in appids.values() if isinstance(v, int)]


def _read_record(cursor: ByteCursor, package_id: int, max_depth: int) -> PackageInfoRecord:
    sha1 = cursor.read_bytes(SHA1_SIZE)
    change_number = cursor.read_u32()
    entries = read_kv_tree(cursor, max_depth=max_depth)
    return PackageInfoRecord(id=package_id, entries=entries, change_number=change_number, sha1=sha1)


def parse_packageinfo(
        buffer: bytes | bytearray | memoryview,
        *,
        max_depth: int = MAX_DEPTH,
) -> list[PackageInfoRecord]:
    """Parses a packageinfo.vdf buffer.

    Args:
        buffer: Complete file contents.
        max_depth: Deepest nesting accepted inside a record.

    Returns:
        Records read before the sentinel, the end of the buffer, or the
        first record that ran out of data.

    Raises:
        InvalidSignatureError: If the magic bytes are not ``55 56``.
        OutOfDataError: If the buffer is shorter than the header.
        UnknownEntryTypeError: If a record holds an unknown type tag.
        MaxDepthExceededError: If a record nests deeper than ``max_depth``.
    """
    cursor = ByteCursor(buffer)
    header = read_header(cursor, PACKAGEINFO_MAGIC)

    records: list[PackageInfoRecord] = []

    while not cursor.at_end:
        record_offset = cursor.offset
        try:
            package_id = cursor.read_u32()
            if package_id == PACKAGEINFO_SENTINEL:
                break
            records.append(_read_record(cursor, package_id, max_depth))
        except OutOfDataError as e:
            logger.debug("packageinfo.vdf ends inside record at offset %d: %s", record_offset, e)
            break

    logger.debug("Parsed %d packages (universe %s)", len(records), header.universe_name)
    return records

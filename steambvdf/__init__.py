"""Decoder and encoder for Steam's binary VDF files."""

from __future__ import annotations

from steambvdf.core.appinfo_parser import AppInfoRecord, fix_signed_template_index, parse_appinfo
from steambvdf.core.binary_kv import KVMap, KVValue, decode_kv_entry, decode_kv_tree, encode_kv_tree
from steambvdf.core.constants import MAX_DEPTH, EntryType
from steambvdf.core.cursor import ByteCursor
from steambvdf.core.errors import (
    BVDFError,
    EncodeError,
    InvalidSignatureError,
    MaxDepthExceededError,
    OutOfDataError,
    UnknownEntryTypeError,
)
from steambvdf.core.header import BinaryHeader, read_header
from steambvdf.core.packageinfo_parser import PackageInfoRecord, parse_packageinfo
from steambvdf.core.shortcuts_parser import (
    NEVER,
    ShortcutsDocument,
    coerce_shortcut,
    dump_shortcuts,
    parse_shortcuts,
    uncoerce_shortcut,
)
from steambvdf.version import __version__

__all__: list[str] = [
    "AppInfoRecord",
    "BVDFError",
    "BinaryHeader",
    "ByteCursor",
    "EncodeError",
    "EntryType",
    "InvalidSignatureError",
    "KVMap",
    "KVValue",
    "MAX_DEPTH",
    "MaxDepthExceededError",
    "NEVER",
    "OutOfDataError",
    "PackageInfoRecord",
    "ShortcutsDocument",
    "UnknownEntryTypeError",
    "__version__",
    "coerce_shortcut",
    "decode_kv_entry",
    "decode_kv_tree",
    "dump_shortcuts",
    "encode_kv_tree",
    "fix_signed_template_index",
    "parse_appinfo",
    "parse_packageinfo",
    "parse_shortcuts",
    "read_header",
    "uncoerce_shortcut",
]

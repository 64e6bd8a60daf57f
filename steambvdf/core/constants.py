# steambvdf/core/constants.py

"""Constants for Steam's binary VDF files.

Type tags of the binary key/value format plus the framing constants of
appinfo.vdf, packageinfo.vdf and shortcuts.vdf.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "APPINFO_MAGIC",
    "APPINFO_RECORD_NAME",
    "APPINFO_SENTINEL",
    "APPINFO_SKIP_BYTES",
    "EntryType",
    "EUniverse",
    "HEADER_SIZE",
    "MAX_DEPTH",
    "PACKAGEINFO_MAGIC",
    "PACKAGEINFO_SENTINEL",
    "SHA1_SIZE",
    "SHORTCUTS_KEY",
    "TEMPLATE_INDEX_KEY",
]


# ===== BINARY KV TYPE TAGS =====


class EntryType(IntEnum):
    """Type tag preceding every binary key/value entry."""

    NESTED = 0x00
    STRING = 0x01
    INT32 = 0x02
    FLOAT32 = 0x03
    POINTER = 0x04  # decoded like INT32
    WIDESTRING = 0x05  # single-byte terminated in observed data
    COLOR = 0x06  # decoded like INT32
    UINT64 = 0x07
    END = 0x08


class EUniverse(IntEnum):
    """Steam universe identifiers found in file headers.

    The header field is passed through untouched; unknown values are kept
    as plain ints.
    """

    Invalid = 0
    Public = 1
    Beta = 2
    Internal = 3
    Dev = 4


# ===== FILE FRAMING =====

# 1 unvalidated byte + 2 magic bytes + 4 byte universe
HEADER_SIZE = 7

APPINFO_MAGIC = b"\x44\x56"
PACKAGEINFO_MAGIC = b"\x55\x56"

APPINFO_SENTINEL = 0x00000000
PACKAGEINFO_SENTINEL = 0xFFFFFFFF

# Bytes between the app id and the KV tree (size, state, timestamp, token, SHA-1, ...)
APPINFO_SKIP_BYTES = 49

APPINFO_RECORD_NAME = "appinfo"

SHA1_SIZE = 20

SHORTCUTS_KEY = "shortcuts"

# (section, key) of the field stored sign-extended by Steam
TEMPLATE_INDEX_KEY = ("config", "steamcontrollertemplateindex")

# Nested maps deeper than this are rejected
MAX_DEPTH = 64

# tests/conftest.py
import struct
from pathlib import Path
from typing import Callable

import pytest

from steambvdf.core.binary_kv import encode_kv_tree


@pytest.fixture
def appinfo_header() -> bytes:
    """7-byte appinfo.vdf header: signature 0x27, magic "DV", universe 1."""
    return b"\x27\x44\x56" + struct.pack("<I", 1)


@pytest.fixture
def packageinfo_header() -> bytes:
    """7-byte packageinfo.vdf header: signature 0x27, magic "UV", universe 1."""
    return b"\x27\x55\x56" + struct.pack("<I", 1)


@pytest.fixture
def make_app_record() -> Callable[..., bytes]:
    """Builds one appinfo record: app id, zeroed skip region, KV tree."""

    def _make(app_id: int, tree: dict, skip: int = 49) -> bytes:
        return struct.pack("<I", app_id) + b"\x00" * skip + encode_kv_tree(tree)

    return _make


@pytest.fixture
def make_package_record() -> Callable[..., bytes]:
    """Builds one packageinfo record: package id, SHA-1, change number, KV tree."""

    def _make(package_id: int, tree: dict, change_number: int = 0, sha1: bytes = b"\x11" * 20) -> bytes:
        return struct.pack("<I", package_id) + sha1 + struct.pack("<I", change_number) + encode_kv_tree(tree)

    return _make


@pytest.fixture
def sample_app_tree() -> dict:
    """Minimal appinfo KV tree for Team Fortress 2."""
    return {
        "appid": 440,
        "common": {
            "name": "Team Fortress 2",
            "type": "Game",
        },
        "config": {
            "installdir": "Team Fortress 2",
        },
    }


@pytest.fixture
def shortcuts_bytes() -> bytes:
    """shortcuts.vdf with two entries, written by hand."""
    buf = bytearray()
    buf += b"\x00shortcuts\x00"
    # Entry "0"
    buf += b"\x00" + b"0\x00"
    buf += b"\x02appid\x00" + struct.pack("<i", -536285310)
    buf += b"\x01appname\x00TestGame\x00"
    buf += b"\x01exe\x00\"/opt/Heroic/heroic\"\x00"
    buf += b"\x02IsHidden\x00" + struct.pack("<i", 1)
    buf += b"\x02AllowOverlay\x00" + struct.pack("<i", 0)
    buf += b"\x02LastPlayTime\x00" + struct.pack("<i", 1700000000)
    buf += b"\x00tags\x00"
    buf += b"\x010\x00favorite\x00"
    buf += b"\x011\x00Emulation\x00"
    buf += b"\x08"  # end tags
    buf += b"\x08"  # end entry
    # Entry "1"
    buf += b"\x00" + b"1\x00"
    buf += b"\x02appid\x00" + struct.pack("<i", -100)
    buf += b"\x01appname\x00Other\x00"
    buf += b"\x02LastPlayTime\x00" + struct.pack("<i", 0)
    buf += b"\x08"  # end entry
    buf += b"\x08"  # end shortcuts
    buf += b"\x08"  # end root
    return bytes(buf)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Writes bytes to a file under tmp_path and returns its path."""

    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write

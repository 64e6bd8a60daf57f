# steambvdf/core/shortcuts_parser.py

"""Read and write Steam's binary shortcuts.vdf (non-Steam games).

The file has no header. It is one KV tree whose only top-level key,
``shortcuts``, holds one nested map per shortcut keyed ``"0"``, ``"1"``, ...
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from steambvdf.core.binary_kv import KVMap, encode_kv_tree, read_kv_tree
from steambvdf.core.constants import MAX_DEPTH, SHORTCUTS_KEY
from steambvdf.core.cursor import ByteCursor
from steambvdf.utils.date_utils import datetime_to_timestamp, timestamp_to_datetime

__all__ = [
    "BOOLEAN_FIELDS",
    "NEVER",
    "ShortcutsDocument",
    "coerce_shortcut",
    "dump_shortcuts",
    "parse_shortcuts",
    "uncoerce_shortcut",
]

logger = logging.getLogger("steambvdf.shortcuts")

BOOLEAN_FIELDS: tuple[str, ...] = ("IsHidden", "AllowDesktopConfig", "AllowOverlay", "OpenVR")
TIMESTAMP_FIELDS: tuple[str, ...] = ("LastPlayTime",)
ARRAY_FIELDS: tuple[str, ...] = ("tags",)

# LastPlayTime of a shortcut that was never launched
NEVER = "Never"


@dataclass(frozen=True)
class ShortcutsDocument:
    """Parsed shortcuts.vdf.

    Attributes:
        shortcuts: One map per non-Steam shortcut, in index order.
    """

    shortcuts: list[dict[str, Any]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.shortcuts)

    def find(self, app_name: str) -> dict[str, Any] | None:
        """Returns the first shortcut whose ``appname`` matches (case-insensitive)."""
        lower_name = app_name.lower()
        for shortcut in self.shortcuts:
            if str(shortcut.get("appname", "")).lower() == lower_name:
                return shortcut
        return None


def _is_index(key: str) -> bool:
    # str.isdigit() also accepts "²" and other digits int() rejects
    return key.isascii() and key.isdigit()


def _index_order(mapping: Mapping[str, Any]) -> list[Any]:
    """Values of an index-keyed map, numeric keys first in numeric order."""
    numeric = sorted((k for k in mapping if _is_index(k)), key=int)
    others = [k for k in mapping if not _is_index(k)]
    return [mapping[k] for k in numeric + others]


# ===== COERCION =====


def coerce_shortcut(entry: Mapping[str, Any]) -> dict[str, Any]:
    """Converts raw shortcut values to Python types.

    - Boolean fields: ``True`` only for ``1``; missing fields become ``False``.
    - ``LastPlayTime``: ``0`` becomes ``NEVER``, other timestamps a UTC
      datetime. Values that are not timestamps are kept.
    - ``tags``: index-keyed map becomes a list of strings.

    Args:
        entry: One raw shortcut map.

    Returns:
        A new map; ``entry`` is left untouched.
    """
    result = dict(entry)

    for name in BOOLEAN_FIELDS:
        value = result.get(name)
        result[name] = value if isinstance(value, bool) else value == 1

    for name in TIMESTAMP_FIELDS:
        if name not in result:
            continue
        value = result[name]
        if value == 0:
            result[name] = NEVER
        elif isinstance(value, int):
            converted = timestamp_to_datetime(value)
            if converted is not None:
                result[name] = converted

    for name in ARRAY_FIELDS:
        value = result.get(name)
        if isinstance(value, Mapping):
            result[name] = [str(v) for v in _index_order(value)]
        elif value is None:
            result[name] = []

    return result


def uncoerce_shortcut(entry: Mapping[str, Any]) -> dict[str, Any]:
    """Reverses ``coerce_shortcut`` so the map can be written back.

    Raw maps pass through unchanged.
    """
    result = dict(entry)

    for name in BOOLEAN_FIELDS:
        if isinstance(result.get(name), bool):
            result[name] = int(result[name])

    for name in TIMESTAMP_FIELDS:
        value = result.get(name)
        if value == NEVER:
            result[name] = 0
        elif isinstance(value, datetime):
            result[name] = datetime_to_timestamp(value)

    for name in ARRAY_FIELDS:
        value = result.get(name)
        if isinstance(value, (list, tuple)):
            result[name] = {str(i): str(tag) for i, tag in enumerate(value)}

    return result


# ===== READ / WRITE =====


def parse_shortcuts(
        buffer: bytes | bytearray | memoryview,
        *,
        convert: bool = True,
        max_depth: int = MAX_DEPTH,
) -> ShortcutsDocument:
    """Parses a shortcuts.vdf buffer.

    Args:
        buffer: Complete file contents.
        convert: Apply ``coerce_shortcut`` to every entry.
        max_depth: Deepest nesting accepted.

    Returns:
        The shortcuts in index order. A file without a ``shortcuts`` map
        yields an empty document.

    Raises:
        OutOfDataError: If the buffer is truncated.
        UnknownEntryTypeError: If an unknown type tag is found.
        MaxDepthExceededError: If nesting goes past ``max_depth``.
    """
    tree = read_kv_tree(ByteCursor(buffer), max_depth=max_depth)

    shortcuts_map = tree.get(SHORTCUTS_KEY, {})
    if not isinstance(shortcuts_map, dict):
        logger.warning("shortcuts.vdf: '%s' is not a map, ignoring it", SHORTCUTS_KEY)
        return ShortcutsDocument()

    entries = [entry for entry in _index_order(shortcuts_map) if isinstance(entry, dict)]
    if convert:
        entries = [coerce_shortcut(entry) for entry in entries]

    logger.debug("Parsed %d shortcuts", len(entries))
    return ShortcutsDocument(shortcuts=entries)


def dump_shortcuts(shortcuts: Sequence[Mapping[str, Any]]) -> bytes:
    """Serializes shortcuts as a complete shortcuts.vdf buffer.

    Accepts raw maps as well as maps produced by ``coerce_shortcut``.

    Args:
        shortcuts: Shortcut maps in the order they should be indexed.

    Returns:
        The file contents.

    Raises:
        EncodeError: If a shortcut holds a value with no binary form.
    """
    tree = {SHORTCUTS_KEY: {str(i): uncoerce_shortcut(s) for i, s in enumerate(shortcuts)}}
    return encode_kv_tree(tree)

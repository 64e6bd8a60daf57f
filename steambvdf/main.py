#!/usr/bin/env python3
"""steam-bvdf - command-line entry point.

Dumps appinfo.vdf, packageinfo.vdf or shortcuts.vdf as JSON or text VDF.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from steambvdf.config import config
from steambvdf.core.appinfo_parser import parse_appinfo
from steambvdf.core.errors import (
    BVDFError,
    InvalidSignatureError,
    MaxDepthExceededError,
    OutOfDataError,
    UnknownEntryTypeError,
)
from steambvdf.core.logging import logger, setup_logging
from steambvdf.core.packageinfo_parser import parse_packageinfo
from steambvdf.core.shortcuts_parser import ShortcutsDocument, parse_shortcuts
from steambvdf.utils.json_exporter import JSONExporter
from steambvdf.utils.vdf_exporter import VDFTextExporter
from steambvdf.version import __app_name__, __version__

__all__ = ["build_parser", "describe_error", "load_steam_file", "main"]

FILE_KINDS = ("appinfo", "packageinfo", "shortcuts")


def describe_error(error: Exception) -> str:
    """Translate a parse failure into a message for the user.

    Args:
        error: The exception raised while loading a file.

    Returns:
        One-line description suitable for stderr.
    """
    if isinstance(error, (InvalidSignatureError, UnknownEntryTypeError, MaxDepthExceededError)):
        return f"file is corrupt or from an unsupported Steam client version ({error})"
    if isinstance(error, OutOfDataError):
        return f"file is truncated ({error})"
    if isinstance(error, OSError):
        return f"could not read file ({error.strerror or error})"
    return str(error)


def load_steam_file(kind: str, file_path: Path, args: argparse.Namespace | None = None) -> Any:
    """Read a Steam file and parse it with the matching parser.

    Args:
        kind: One of ``appinfo``, ``packageinfo``, ``shortcuts``.
        file_path: Path to the file.
        args: Parsed CLI options; ``config`` values are used where absent.

    Returns:
        A list of records, or a ShortcutsDocument.

    Raises:
        BVDFError: If the file cannot be decoded.
        OSError: If the file cannot be read. A missing shortcuts.vdf is
            not an error: Steam only creates it once a shortcut exists.
    """
    max_depth = getattr(args, "max_depth", None)
    if max_depth is None:
        max_depth = config.MAX_DEPTH

    if kind == "shortcuts" and not file_path.exists():
        logger.info("%s does not exist, no shortcuts", file_path)
        return ShortcutsDocument()

    data = file_path.read_bytes()
    logger.debug("Read %d bytes from %s", len(data), file_path)

    if kind == "appinfo":
        skip = getattr(args, "skip", None)
        next_skip = getattr(args, "next_skip", None)
        return parse_appinfo(
            data,
            skip_bytes=skip if skip is not None else config.APPINFO_SKIP_BYTES,
            next_skip_bytes=next_skip if next_skip is not None else config.APPINFO_NEXT_SKIP_BYTES,
            max_depth=max_depth,
        )
    if kind == "packageinfo":
        return parse_packageinfo(data, max_depth=max_depth)
    if kind == "shortcuts":
        return parse_shortcuts(data, convert=not getattr(args, "raw", False), max_depth=max_depth)

    raise ValueError(f"Unknown file kind: {kind}")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="steambvdf",
        description="Decode Steam's binary VDF files (appinfo.vdf, packageinfo.vdf, shortcuts.vdf).",
    )
    parser.add_argument("--version", action="version", version=f"{__app_name__} {__version__}")
    parser.add_argument("kind", choices=FILE_KINDS, help="Which file format PATH holds")
    parser.add_argument("path", type=Path, help="Path to the .vdf file")
    parser.add_argument(
        "-f", "--format",
        choices=("json", "vdf"),
        default=None,
        help="Output format (default: %s)" % config.OUTPUT_FORMAT,
    )
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write to this file instead of stdout")
    parser.add_argument("--skip", type=int, default=None, help="appinfo: bytes skipped after the first app id")
    parser.add_argument("--next-skip", type=int, default=None, help="appinfo: bytes skipped after later app ids")
    parser.add_argument("--max-depth", type=int, default=None, help="Deepest nesting accepted")
    parser.add_argument("--raw", action="store_true", help="shortcuts: keep values as stored, no conversion")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main command-line flow.

    Returns:
        Exit code (0 = success, 1 = failure).
    """
    args = build_parser().parse_args(argv)

    level = config.LOG_LEVEL
    if args.verbose == 1:
        level = "INFO"
    elif args.verbose > 1:
        level = "DEBUG"
    setup_logging(level, config.LOG_FILE)

    try:
        result = load_steam_file(args.kind, args.path, args)
    except (BVDFError, OSError) as e:
        logger.debug("Failed to load %s", args.path, exc_info=True)
        print(f"{args.path}: {describe_error(e)}", file=sys.stderr)
        return 1

    output_format = args.format or config.OUTPUT_FORMAT
    if output_format == "vdf":
        text = VDFTextExporter.dumps(result, root_key=args.kind)
    else:
        text = JSONExporter.dumps(result)

    if args.output is not None:
        try:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(text, encoding="utf-8")
        except OSError as e:
            print(f"{args.output}: {describe_error(e)}", file=sys.stderr)
            return 1
        logger.info("Wrote %s output to %s", output_format, args.output)
    else:
        print(text)

    return 0


if __name__ == "__main__":
    sys.exit(main())

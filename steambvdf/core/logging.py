"""Centralized logging configuration for steam-bvdf.

Provides the package logger with console output and optional file logging.
Library modules only create child loggers; nothing is configured until a
caller (normally the CLI) runs ``setup_logging``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

__all__ = ["logger", "setup_logging"]

logger = logging.getLogger("steambvdf")
logger.addHandler(logging.NullHandler())


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: Path | None = None,
) -> None:
    """Configure the package logger.

    Args:
        level: The logging level (default: WARNING). Level names such as
            ``"DEBUG"`` are accepted too.
        log_file: Optional path to a log file. If provided, logs will
            also be written to this file.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger.setLevel(level)

    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

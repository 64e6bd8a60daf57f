"""
Configuration for the steam-bvdf command-line tool.

Values come from the dataclass defaults, then from a ``.env`` file and
``STEAMBVDF_*`` environment variables. The codec never reads this module;
the CLI passes the values in as parameters.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path

from dotenv import load_dotenv

from steambvdf.core.constants import APPINFO_SKIP_BYTES, MAX_DEPTH

logger = logging.getLogger("steambvdf.config")


__all__ = ["Config", "ENV_PREFIX", "config"]

ENV_PREFIX = "STEAMBVDF_"


@dataclass
class Config:
    """
    Central configuration handling for the tool.
    Holds logging settings, codec limits and output defaults.
    """

    LOG_LEVEL: str = "WARNING"
    LOG_FILE: Path | None = None

    # appinfo.vdf record framing
    APPINFO_SKIP_BYTES: int = APPINFO_SKIP_BYTES
    APPINFO_NEXT_SKIP_BYTES: int | None = None

    MAX_DEPTH: int = MAX_DEPTH

    OUTPUT_FORMAT: str = "json"

    def __post_init__(self):
        """Apply .env and environment overrides after instantiation."""
        load_dotenv()
        self._load_environment()

    def _load_environment(self) -> None:
        """Override fields from ``STEAMBVDF_<FIELD>`` variables."""
        for f in fields(self):
            raw = os.getenv(ENV_PREFIX + f.name)
            if raw is None or raw == "":
                continue

            if f.name in ("APPINFO_SKIP_BYTES", "APPINFO_NEXT_SKIP_BYTES", "MAX_DEPTH"):
                try:
                    setattr(self, f.name, int(raw))
                except ValueError:
                    logger.error("Ignoring %s%s=%r: not an integer", ENV_PREFIX, f.name, raw)
            elif f.name == "LOG_FILE":
                self.LOG_FILE = Path(raw)
            elif f.name == "OUTPUT_FORMAT":
                self.OUTPUT_FORMAT = raw.lower()
            else:
                setattr(self, f.name, raw)


# Global instance
config = Config()

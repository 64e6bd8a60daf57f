# steambvdf/utils/json_exporter.py

"""JSON export utility for parsed binary VDF data.

Turns records, documents and KV trees into JSON for inspection, diffing,
or interoperability with other tools. Key order is kept as in the file.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger("steambvdf.json_exporter")

__all__ = ["JSONExporter"]


class JSONExporter:
    """Exports parsed Steam data as JSON."""

    @staticmethod
    def to_jsonable(obj: Any) -> Any:
        """Converts parsed data into plain JSON types.

        Dataclasses become dicts, datetimes ISO 8601 strings, bytes hex
        strings; int subclasses such as ``vdf.UINT_64`` become plain ints.

        Args:
            obj: A record, document, KV tree or scalar.

        Returns:
            An equivalent structure of dicts, lists, strings and numbers.
        """
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return {f.name: JSONExporter.to_jsonable(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
        if isinstance(obj, Mapping):
            return {str(k): JSONExporter.to_jsonable(v) for k, v in obj.items()}
        if isinstance(obj, (list, tuple)):
            return [JSONExporter.to_jsonable(v) for v in obj]
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, (bytes, bytearray)):
            return bytes(obj).hex()
        if isinstance(obj, bool):
            return obj
        if isinstance(obj, int):
            return int(obj)
        if isinstance(obj, float) and not math.isfinite(obj):
            # JSON has no NaN or Infinity
            return str(obj)
        return obj

    @staticmethod
    def dumps(obj: Any, indent: int | None = 2) -> str:
        """Serializes parsed data to a JSON string."""
        return json.dumps(JSONExporter.to_jsonable(obj), indent=indent, ensure_ascii=False)

    @staticmethod
    def export(obj: Any, output_path: Path) -> None:
        """Writes parsed data as a JSON file.

        Args:
            obj: Data to export.
            output_path: Path to write the JSON file.

        Raises:
            OSError: If the file cannot be written.
        """
        text = JSONExporter.dumps(obj)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(text)
            fh.write("\n")

        logger.info("Exported JSON (%d bytes) to %s", len(text), output_path)

"""Text VDF exporter for human-readable output.

Renders decoded binary VDF trees in Valve's text KeyValues format for
debugging, diffing and manual inspection.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

import vdf

from steambvdf.utils.date_utils import format_timestamp

logger = logging.getLogger("steambvdf.vdf_exporter")

__all__ = ["VDFTextExporter"]


class VDFTextExporter:
    """Exports parsed Steam data as text VDF.

    Uses the ``vdf`` library's ``dumps()`` function to produce correctly
    formatted Valve Data Format output.
    """

    @staticmethod
    def to_text_tree(obj: Any) -> Any:
        """Converts parsed data into a tree of strings.

        Text VDF only knows strings and maps: lists and record sequences
        become index-keyed maps, dataclasses their field maps, and every
        scalar its text form.

        Args:
            obj: A record, document, KV tree or scalar.

        Returns:
            A map of maps and strings, or a string for scalar input.
        """
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return {f.name: VDFTextExporter.to_text_tree(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
        if isinstance(obj, Mapping):
            return {str(k): VDFTextExporter.to_text_tree(v) for k, v in obj.items()}
        if isinstance(obj, (list, tuple)):
            return {str(i): VDFTextExporter.to_text_tree(v) for i, v in enumerate(obj)}
        if isinstance(obj, datetime):
            return format_timestamp(obj)
        if isinstance(obj, (bytes, bytearray)):
            return bytes(obj).hex()
        if isinstance(obj, bool):
            return "1" if obj else "0"
        if isinstance(obj, int):
            # vdf's int markers render as e.g. "UINT_64(5)" through str()
            return str(int(obj))
        return str(obj)

    @staticmethod
    def dumps(obj: Any, root_key: str | None = None) -> str:
        """Renders parsed data as text VDF.

        Args:
            obj: Data to render.
            root_key: Wrap the output in a single top-level section.

        Returns:
            The text VDF document.
        """
        tree = VDFTextExporter.to_text_tree(obj)
        if not isinstance(obj, Mapping) or root_key is not None:
            tree = {root_key or "root": tree}
        return vdf.dumps(tree, pretty=True)

    @staticmethod
    def export(obj: Any, output_path: Path, root_key: str | None = None) -> None:
        """Writes parsed data as a text VDF file.

        Raises:
            OSError: If the file cannot be written.
        """
        vdf_text = VDFTextExporter.dumps(obj, root_key)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(vdf_text)

        logger.info("Exported text VDF to %s", output_path)

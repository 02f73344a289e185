"""Geometry writer for saving batched buffers.

This module provides the GeometryWriter class for writing batched geometry
either as JSON or as a NumPy ``.npz`` archive.
"""

import json
from pathlib import Path
from typing import Any

import numpy as np

from svgtess.domain import BatchedGeometry
from svgtess.exceptions import GeometrySaveError

NPZ_SUFFIX = ".npz"


def get_geometry_path(input_path: Path) -> Path:
    """Generate the default output path for a document.

    Converts: drawing.svg -> drawing-geometry.json

    Args:
        input_path: Source document path

    Returns:
        Path next to the input with a ``-geometry.json`` suffix
    """
    return input_path.parent / f"{input_path.stem}-geometry.json"


class GeometryWriter:
    """Writes batched geometry to disk.

    The format follows the output suffix: ``.npz`` writes a compressed NumPy
    archive with ``fill`` and ``stroke`` arrays shaped (n, 7), anything else
    writes JSON with the flat buffers.

    Example:
        writer = GeometryWriter(geometry, Path("drawing-geometry.json"))
        writer.save({"source": "drawing.svg"})
    """

    def __init__(self, geometry: BatchedGeometry, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            geometry: Buffers to write
            output_path: Destination file
        """
        self._geometry = geometry
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        """Destination file."""
        return self._output_path

    def save(self, metadata: dict[str, Any] | None = None) -> None:
        """Write the geometry.

        Args:
            metadata: JSON-serializable values stored next to the buffers

        Raises:
            GeometrySaveError: If the file cannot be written
        """
        metadata = metadata or {}
        try:
            if self._output_path.suffix.lower() == NPZ_SUFFIX:
                self._save_npz(metadata)
            else:
                self._save_json(metadata)
        except (OSError, TypeError, ValueError) as e:
            raise GeometrySaveError(str(self._output_path), str(e)) from e

    def _save_json(self, metadata: dict[str, Any]) -> None:
        document = self._geometry.to_dict()
        document["metadata"] = metadata
        with self._output_path.open("w", encoding="utf-8") as f:
            json.dump(document, f)

    def _save_npz(self, metadata: dict[str, Any]) -> None:
        fill, stroke = self._geometry.as_arrays()
        with self._output_path.open("wb") as f:
            np.savez_compressed(
                f,
                fill=fill,
                stroke=stroke,
                metadata=np.array(json.dumps(metadata)),
            )

    @staticmethod
    def get_geometry_path(input_path: Path) -> Path:
        """See get_geometry_path."""
        return get_geometry_path(input_path)

"""SVG document reader.

This module provides the SvgReader class for loading SVG files and
extracting their shape elements into domain models.
"""

import re
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from pathlib import Path

from svgtess.domain import ElementKind, ShapeElement
from svgtess.exceptions import DocumentFormatError, DocumentLoadError

DEFAULT_DIMENSIONS = (800.0, 600.0)

# Pixels per unit at 96 DPI.
UNIT_SCALES: dict[str, float] = {
    "px": 1.0,
    "mm": 3.779528,
    "cm": 37.79528,
    "in": 96.0,
    "pt": 1.333333,
}

_LEADING_NUMBER_RE = re.compile(r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)")
_VIEWBOX_SEPARATOR_RE = re.compile(r"[\s,]+")
_SHAPE_TAGS = {kind.value: kind for kind in ElementKind}


def local_name(tag: str) -> str:
    """Strip an ``{namespace}`` prefix from an element or attribute name."""
    return tag.rsplit("}", 1)[-1]


def parse_length(value: str) -> float:
    """Convert a length attribute to pixels.

    Args:
        value: Length such as ``"210mm"``, ``"4in"`` or ``"300"``

    Returns:
        Length in pixels

    Raises:
        ValueError: If the value does not start with a number
    """
    text = value.strip().lower()
    for unit, scale in UNIT_SCALES.items():
        if text.endswith(unit):
            return float(text[: -len(unit)]) * scale

    # Unitless or unknown unit: take the leading number as pixels.
    match = _LEADING_NUMBER_RE.match(text)
    if match is None:
        raise ValueError(f"Not a length: {value!r}")
    return float(match.group(0))


class SvgReader:
    """Loads SVG documents and extracts shape elements.

    Example:
        reader = SvgReader(Path("drawing.svg"))
        reader.load()
        for element in reader.iter_elements():
            print(element.label)
    """

    def __init__(self, svg_path: Path) -> None:
        """Initialize the reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path
        self._root: ET.Element | None = None

    @property
    def path(self) -> Path:
        """Path of the document."""
        return self._svg_path

    def load(self) -> None:
        """Load and parse the document.

        Raises:
            FileNotFoundError: If the file does not exist
            DocumentFormatError: If the file is not well-formed XML or its
                root element is not ``svg``
            DocumentLoadError: If the file cannot be read
        """
        if not self._svg_path.exists():
            raise FileNotFoundError(f"SVG file not found: {self._svg_path}")

        try:
            root = ET.parse(self._svg_path).getroot()
        except ET.ParseError as e:
            raise DocumentFormatError(str(self._svg_path), str(e)) from e
        except OSError as e:
            raise DocumentLoadError(str(self._svg_path), str(e)) from e

        if local_name(root.tag) != "svg":
            raise DocumentFormatError(
                str(self._svg_path), f"root element is <{local_name(root.tag)}>, expected <svg>"
            )
        self._root = root

    def _require_root(self) -> ET.Element:
        if self._root is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return self._root

    @property
    def dimensions(self) -> tuple[float, float]:
        """Document width and height in pixels.

        Falls back to 800x600 when either attribute is missing or not a
        length.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        root = self._require_root()
        try:
            return (
                parse_length(root.get("width", "")),
                parse_length(root.get("height", "")),
            )
        except ValueError:
            return DEFAULT_DIMENSIONS

    @property
    def view_box(self) -> tuple[float, float, float, float]:
        """Document viewBox as (min_x, min_y, width, height).

        Falls back to ``(0, 0, width, height)`` when the attribute is missing
        or malformed.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        root = self._require_root()
        raw = root.get("viewBox")
        if raw:
            parts = [part for part in _VIEWBOX_SEPARATOR_RE.split(raw.strip()) if part]
            try:
                values = [float(part) for part in parts]
            except ValueError:
                values = []
            if len(values) >= 4:
                return (values[0], values[1], values[2], values[3])

        width, height = self.dimensions
        return (0.0, 0.0, width, height)

    def iter_elements(self) -> Iterator[ShapeElement]:
        """Iterate over rect, path, circle and ellipse elements.

        Elements are yielded in document order at any nesting depth.
        Namespaces are ignored, so unprefixed and SVG-namespaced documents
        read the same.

        Yields:
            ShapeElement with the raw attribute strings

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        root = self._require_root()
        for node in root.iter():
            if not isinstance(node.tag, str):
                continue
            kind = _SHAPE_TAGS.get(local_name(node.tag))
            if kind is None:
                continue

            attributes = {local_name(name): value for name, value in node.attrib.items()}
            yield ShapeElement(
                kind=kind,
                attributes=attributes,
                style=attributes.get("style"),
                element_id=attributes.get("id"),
            )

    def close(self) -> None:
        """Release the parsed document."""
        self._root = None

    def __enter__(self) -> "SvgReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()

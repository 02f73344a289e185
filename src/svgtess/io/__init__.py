"""Document I/O layer for svgtess.

This module handles reading SVG documents and writing batched geometry.
It keeps XML and file formats away from the geometry core.

Key responsibilities:
- Load SVG documents and extract shape elements in document order
- Read document dimensions and viewBox
- Convert elements to shapes
- Write batched geometry as JSON or NumPy archives

Key classes:
- SvgReader: Load documents and extract elements
- GeometryWriter: Save batched geometry
"""

from svgtess.io.converter import element_style, element_to_shape
from svgtess.io.reader import SvgReader, parse_length
from svgtess.io.writer import GeometryWriter, get_geometry_path

__all__ = [
    "GeometryWriter",
    "SvgReader",
    "element_style",
    "element_to_shape",
    "get_geometry_path",
    "parse_length",
]

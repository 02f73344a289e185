"""Domain models for svgtess.

This module contains the value types shared by every stage of the pipeline:
points, flattened curve vertices, colors, styles, raw document elements and
the batched output buffers. The models carry no parsing logic.

Key classes:
- Point2D: An immutable 2D point
- CurvePoint: A flattened path vertex with optional control points
- Color: An 8-bit RGBA color
- Style: Resolved fill and stroke paint
- ShapeElement: A shape element extracted from a document
- BatchedGeometry: Interleaved fill and stroke vertex buffers
"""

from svgtess.domain.batched import FLOATS_PER_VERTEX, BatchedGeometry
from svgtess.domain.document import ElementKind, ShapeElement
from svgtess.domain.primitives import Color, CurvePoint, Point2D, Segment, Triangle
from svgtess.domain.style import Style

__all__: list[str] = [
    # Enums
    "ElementKind",
    # Core types
    "Point2D",
    "CurvePoint",
    "Color",
    "Segment",
    "Triangle",
    "Style",
    "ShapeElement",
    "BatchedGeometry",
    "FLOATS_PER_VERTEX",
]

"""Core processing algorithms for svgtess.

This module contains the geometry core:

- Path data parsing and interpretation into flattened vertices
- Bezier and arc flattening
- Style resolution
- The shape model and its triangulation
- Scene normalization and geometry batching

DocumentProcessor depends on svgtess.io and is imported from
svgtess.core.processor directly.

Key functions:
- parse_path_data: Tokenize path data into commands
- flatten_cubic / flatten_quadratic / flatten_arc: Sample curves
- resolve_style: Resolve fill and stroke paint
- tessellate_contour: Triangulate a contour through the tessellator
- normalize_to_origin: Move the scene to the origin

Key classes:
- PathInterpreter: Turns commands into vertices
- BasicShape / PathShape / FilledPathShape: The shape model
- ContourTessellator: Facade over the external tessellator
- BatchedGeometryBuilder: Builds interleaved vertex buffers
"""

from svgtess.core.batching import BatchedGeometryBuilder
from svgtess.core.flatten import (
    CURVE_SEGMENTS,
    flatten_arc,
    flatten_cubic,
    flatten_quadratic,
    reflect_control_point,
    sample_ellipse,
)
from svgtess.core.geometry import (
    identity_matrix,
    point_in_polygon,
    rotation_matrix,
    scale_matrix,
    transform_point,
    translation_matrix,
    winding_number,
)
from svgtess.core.interpreter import PathInterpreter
from svgtess.core.normalizer import compute_global_minimum, normalize_to_origin
from svgtess.core.path_parser import PathCommand, parse_path_data
from svgtess.core.shapes import (
    BasicShape,
    FilledPathShape,
    PathShape,
    Shape,
    create_circle,
    create_ellipse,
    create_rectangle,
)
from svgtess.core.style import parse_color, parse_style_declarations, resolve_style
from svgtess.core.tessellation import (
    ContourTessellator,
    TessellationResult,
    fan_triangulate,
    tessellate_contour,
)

__all__ = [
    "CURVE_SEGMENTS",
    # Shape classes
    "BasicShape",
    # Batching
    "BatchedGeometryBuilder",
    # Tessellation
    "ContourTessellator",
    "FilledPathShape",
    # Path handling
    "PathCommand",
    "PathInterpreter",
    "PathShape",
    "Shape",
    "TessellationResult",
    "compute_global_minimum",
    "create_circle",
    "create_ellipse",
    "create_rectangle",
    "fan_triangulate",
    "flatten_arc",
    "flatten_cubic",
    "flatten_quadratic",
    # Geometry functions
    "identity_matrix",
    "normalize_to_origin",
    "parse_color",
    "parse_path_data",
    "parse_style_declarations",
    "point_in_polygon",
    "reflect_control_point",
    "resolve_style",
    "rotation_matrix",
    "sample_ellipse",
    "scale_matrix",
    "tessellate_contour",
    "transform_point",
    "translation_matrix",
    "winding_number",
]

"""Shape model.

Every drawable element becomes a Shape: an ordered list of flattened
vertices plus a resolved paint Style. Shapes expose three derived views of
their geometry that the batching stage consumes: a contour for filling, fill
triangles and stroke segments.

Shape kinds:
- BasicShape: rect, circle and ellipse outlines, filled by fan triangulation
- PathShape: path data interpreted into vertices, stroke only
- FilledPathShape: path data with a fill, triangulated by the tessellator
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

import numpy as np

from svgtess.config import WindingRule
from svgtess.core.flatten import CURVE_SEGMENTS, sample_ellipse
from svgtess.core.geometry import transform_point
from svgtess.core.interpreter import PathInterpreter
from svgtess.core.path_parser import parse_path_data
from svgtess.core.tessellation import ContourTessellator, fan_triangulate, tessellate_contour
from svgtess.domain import Color, CurvePoint, Point2D, Segment, Style, Triangle
from svgtess.utils.diagnostics import DiagnosticsSink, default_sink

CLOSURE_TOLERANCE = 0.001


class Shape(ABC):
    """Base class for all shapes.

    Attributes:
        vertices: Flattened outline vertices in drawing order
        style: Resolved paint
        label: Human-readable name used in logs
    """

    def __init__(self, style: Style | None = None, label: str = "shape") -> None:
        self.vertices: list[CurvePoint] = []
        self.style = style if style is not None else Style()
        self.label = label

    @property
    def fill_color(self) -> Color | None:
        """Fill color, None if the shape is not filled."""
        return self.style.fill_color

    @property
    def stroke_color(self) -> Color | None:
        """Stroke color, None if the shape is not stroked."""
        return self.style.stroke_color

    @property
    def stroke_width(self) -> float:
        """Stroke width in user units."""
        return self.style.stroke_width

    @property
    def vertex_count(self) -> int:
        """Number of outline vertices."""
        return len(self.vertices)

    def is_empty(self) -> bool:
        """Check if the shape has no vertices."""
        return not self.vertices

    @abstractmethod
    def contour_vertices(self) -> list[Point2D]:
        """Outline positions handed to triangulation."""

    @abstractmethod
    def fill_triangles(self) -> list[Triangle]:
        """Triangles covering the filled area, empty if not filled."""

    def stroke_segments(self) -> list[Segment]:
        """Consecutive vertex pairs to draw as lines.

        Returns:
            One segment per consecutive pair, empty when the shape has fewer
            than 2 vertices, no visible stroke color or a zero width
        """
        if len(self.vertices) < 2 or not self.style.has_stroke:
            return []

        points = [vertex.point for vertex in self.vertices]
        return list(zip(points, points[1:]))

    def iter_geometry_points(self) -> Iterator[Point2D]:
        """Yield every coordinate the shape owns.

        Covers vertex positions, control points and fill triangle vertices,
        which is what the global normalizer needs to find the scene minimum.
        """
        for vertex in self.vertices:
            yield vertex.point
            if vertex.control_point1 is not None:
                yield vertex.control_point1
            if vertex.control_point2 is not None:
                yield vertex.control_point2

        for triangle in self.fill_triangles():
            yield from triangle

    def translate(self, dx: float, dy: float) -> None:
        """Move the shape by (dx, dy), control points included."""
        for vertex in self.vertices:
            vertex.translate(dx, dy)

    def transform(self, matrix: np.ndarray) -> None:
        """Apply a 4x4 homogeneous transform to vertices and control points.

        Args:
            matrix: Column-vector transform, see svgtess.core.geometry
        """
        for vertex in self.vertices:
            vertex.point = transform_point(matrix, vertex.point)
            if vertex.control_point1 is not None:
                vertex.control_point1 = transform_point(matrix, vertex.control_point1)
            if vertex.control_point2 is not None:
                vertex.control_point2 = transform_point(matrix, vertex.control_point2)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(label={self.label!r}, vertices={len(self.vertices)})"


class BasicShape(Shape):
    """Outline shape filled as a triangle fan.

    The fan is anchored at the first contour vertex, which is exact for the
    convex outlines the factories produce.
    """

    def __init__(
        self,
        points: list[Point2D] | None = None,
        style: Style | None = None,
        label: str = "shape",
    ) -> None:
        super().__init__(style=style, label=label)
        if points:
            self.vertices = [CurvePoint(point) for point in points]

    def contour_vertices(self) -> list[Point2D]:
        return [vertex.point for vertex in self.vertices]

    def fill_triangles(self) -> list[Triangle]:
        if len(self.vertices) < 3 or not self.style.has_fill:
            return []
        return fan_triangulate(self.contour_vertices())


def create_rectangle(
    x: float,
    y: float,
    width: float,
    height: float,
    style: Style | None = None,
    label: str = "rect",
) -> BasicShape:
    """Create an axis-aligned rectangle.

    The outline has five vertices; the last repeats the first to close it.

    Args:
        x: Left edge
        y: Top edge
        width: Horizontal extent
        height: Vertical extent
        style: Resolved paint
        label: Log label

    Returns:
        Rectangle shape
    """
    corner = Point2D(x, y)
    points = [
        corner,
        Point2D(x + width, y),
        Point2D(x + width, y + height),
        Point2D(x, y + height),
        corner,
    ]
    return BasicShape(points, style=style, label=label)


def create_ellipse(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    segments: int = CURVE_SEGMENTS,
    style: Style | None = None,
    label: str = "ellipse",
) -> BasicShape:
    """Create an axis-aligned ellipse sampled at ``segments + 1`` points."""
    return BasicShape(sample_ellipse(cx, cy, rx, ry, segments), style=style, label=label)


def create_circle(
    cx: float,
    cy: float,
    r: float,
    segments: int = CURVE_SEGMENTS,
    style: Style | None = None,
    label: str = "circle",
) -> BasicShape:
    """Create a circle sampled at ``segments + 1`` points."""
    return create_ellipse(cx, cy, r, r, segments, style=style, label=label)


class PathShape(BasicShape):
    """Shape built from path data. Stroke only.

    A PathShape never fills, whatever its style says; paths with a fill are
    FilledPathShape instances.

    Example:
        shape = PathShape(style=style)
        shape.parse_path_data("M0,0 C10,0 10,10 0,10")
        segments = shape.stroke_segments()
    """

    def __init__(
        self,
        style: Style | None = None,
        label: str = "path",
        curve_segments: int = CURVE_SEGMENTS,
        sink: DiagnosticsSink | None = None,
    ) -> None:
        super().__init__(style=style, label=label)
        self.curve_segments = curve_segments
        self._sink = default_sink(sink)

    @property
    def fill_color(self) -> Color | None:
        return None

    def parse_path_data(self, path_data: str | None) -> None:
        """Replace the vertices with the interpretation of ``path_data``.

        The cursor starts at the origin on every call.

        Args:
            path_data: Content of a path ``d`` attribute
        """
        interpreter = PathInterpreter(curve_segments=self.curve_segments, sink=self._sink)
        self.vertices = interpreter.interpret(parse_path_data(path_data, self._sink))

    def fill_triangles(self) -> list[Triangle]:
        return []


class FilledPathShape(PathShape):
    """Path shape filled through the tessellator.

    Triangles are derived lazily from the current vertices and cached.
    Anything that changes the vertices other than a translation drops the
    cache; translation moves the cached triangles along.
    """

    def __init__(
        self,
        style: Style | None = None,
        label: str = "path",
        curve_segments: int = CURVE_SEGMENTS,
        winding_rule: WindingRule = WindingRule.EVEN_ODD,
        closure_tolerance: float = CLOSURE_TOLERANCE,
        sink: DiagnosticsSink | None = None,
    ) -> None:
        super().__init__(style=style, label=label, curve_segments=curve_segments, sink=sink)
        self.closure_tolerance = closure_tolerance
        self._tessellator = ContourTessellator(winding_rule)
        self._triangles: list[Triangle] | None = None

    @property
    def fill_color(self) -> Color | None:
        return self.style.fill_color

    @property
    def winding_rule(self) -> WindingRule:
        """Fill rule used for tessellation."""
        return self._tessellator.winding_rule

    @property
    def is_tessellated(self) -> bool:
        """True if fill triangles are cached."""
        return self._triangles is not None

    def parse_path_data(self, path_data: str | None) -> None:
        super().parse_path_data(path_data)
        self._triangles = None

    def contour_vertices(self) -> list[Point2D]:
        """Outline positions, closed back to the first vertex if needed.

        A closing copy of the first vertex is appended when the last vertex
        differs from it by more than the closure tolerance on either axis.
        """
        contour = [vertex.point for vertex in self.vertices]
        if len(contour) > 1:
            first, last = contour[0], contour[-1]
            if (
                abs(first.x - last.x) > self.closure_tolerance
                or abs(first.y - last.y) > self.closure_tolerance
            ):
                contour.append(first)
        return contour

    def tessellate(self) -> list[Triangle]:
        """Recompute the fill triangles from the current vertices.

        Returns:
            The new triangle list, empty when the fill is absent or transparent
        """
        if not self.style.has_fill:
            self._triangles = []
        else:
            self._triangles = tessellate_contour(
                self.contour_vertices(), self._tessellator, self._sink
            )
        return self._triangles

    def fill_triangles(self) -> list[Triangle]:
        if self._triangles is None:
            return self.tessellate()
        return self._triangles

    def translate(self, dx: float, dy: float) -> None:
        super().translate(dx, dy)
        if self._triangles is not None:
            self._triangles = [
                (a.translated(dx, dy), b.translated(dx, dy), c.translated(dx, dy))
                for a, b, c in self._triangles
            ]

    def transform(self, matrix: np.ndarray) -> None:
        super().transform(matrix)
        self._triangles = None

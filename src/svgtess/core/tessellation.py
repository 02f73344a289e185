"""Polygon tessellation.

ContourTessellator is a thin facade over shapely/GEOS that mimics the
classic contour-in, indexed-triangles-out tessellator interface: the
contours' linework is noded at every self-intersection, polygonized into
faces, each face is kept or discarded by the winding rule and the kept faces
are split by constrained Delaunay triangulation.

tessellate_contour is the adapter the shape model talks to. It guards the
input, regroups the indexed output into triangles and turns tessellator
failures into an empty result.

fan_triangulate is the shortcut used by basic shapes (rect, circle,
ellipse). It is only correct for convex outlines or outlines that are
star-shaped from their first vertex.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

import shapely
from shapely.errors import GEOSException
from shapely.geometry import LineString

from svgtess.config import WindingRule
from svgtess.core.geometry import point_in_polygon, winding_number
from svgtess.domain import Point2D, Triangle
from svgtess.exceptions import TessellationError
from svgtess.utils.diagnostics import AnomalyKind, DiagnosticsSink, anomaly, default_sink

VERTICES_PER_POLYGON = 3


@dataclass
class TessellationResult:
    """Indexed tessellator output.

    Attributes:
        vertices: Output vertex table
        elements: Indices into ``vertices``, three per triangle
    """

    vertices: list[Point2D] = field(default_factory=list)
    elements: list[int] = field(default_factory=list)

    @property
    def triangle_count(self) -> int:
        """Number of complete triangles in ``elements``."""
        return len(self.elements) // VERTICES_PER_POLYGON


class ContourTessellator:
    """Triangulates closed contours under a winding rule.

    Example:
        tessellator = ContourTessellator(WindingRule.EVEN_ODD)
        result = tessellator.tessellate([square_points])
        # result.elements holds 3 indices per triangle
    """

    def __init__(self, winding_rule: WindingRule = WindingRule.EVEN_ODD) -> None:
        self.winding_rule = winding_rule

    def tessellate(self, contours: Sequence[Sequence[Point2D]]) -> TessellationResult:
        """Tessellate one or more contours together.

        Contours are implicitly closed. Overlapping regions are resolved by
        the winding rule across all contours.

        Args:
            contours: Contour point lists

        Returns:
            Indexed triangles covering the filled region

        Raises:
            TessellationError: If the geometry library rejects the input
        """
        rings = [list(contour) for contour in contours if _distinct_count(contour) >= 3]
        result = TessellationResult()
        if not rings:
            return result

        try:
            linework = shapely.unary_union(
                [LineString([p.to_tuple() for p in _closed(ring)]) for ring in rings]
            )
            faces = shapely.polygonize(shapely.get_parts(linework))
        except (GEOSException, ValueError) as e:
            raise TessellationError(str(e)) from e

        index_of: dict[tuple[float, float], int] = {}
        for face in shapely.get_parts(faces):
            if face.is_empty or face.area <= 0.0:
                continue

            probe = face.representative_point()
            if not self._is_filled(Point2D(probe.x, probe.y), rings):
                continue

            try:
                triangles = shapely.constrained_delaunay_triangles(face)
            except GEOSException as e:
                raise TessellationError(str(e)) from e

            for triangle in shapely.get_parts(triangles):
                for x, y in list(triangle.exterior.coords)[:VERTICES_PER_POLYGON]:
                    key = (float(x), float(y))
                    if key not in index_of:
                        index_of[key] = len(result.vertices)
                        result.vertices.append(Point2D(*key))
                    result.elements.append(index_of[key])

        return result

    def _is_filled(self, point: Point2D, rings: list[list[Point2D]]) -> bool:
        if self.winding_rule == WindingRule.NONZERO:
            return sum(winding_number(point, ring) for ring in rings) != 0

        inside = False
        for ring in rings:
            if point_in_polygon(point, ring):
                inside = not inside
        return inside


def _distinct_count(points: Sequence[Point2D]) -> int:
    return len(set(points))


def _closed(points: list[Point2D]) -> list[Point2D]:
    if points[0] != points[-1]:
        return [*points, points[0]]
    return points


def tessellate_contour(
    contour: Sequence[Point2D],
    tessellator: ContourTessellator,
    sink: DiagnosticsSink | None = None,
) -> list[Triangle]:
    """Tessellate a single closed contour into triangles.

    Args:
        contour: Closed contour, usually from a shape's contour_vertices()
        tessellator: Tessellator configured with the fill rule
        sink: Receiver for recoverable anomalies

    Returns:
        Triangles in tessellator output order; empty when the contour is too
        small or the tessellator fails
    """
    sink = default_sink(sink)

    if len(contour) < VERTICES_PER_POLYGON:
        sink.report(
            anomaly(
                AnomalyKind.EMPTY_OR_MISSING_DATA,
                "Contour too small to fill",
                vertices=len(contour),
            )
        )
        return []

    try:
        result = tessellator.tessellate([contour])
    except TessellationError as e:
        sink.report(
            anomaly(
                AnomalyKind.MALFORMED_INPUT,
                "Tessellation failed, fill dropped",
                reason=e.reason,
                vertices=len(contour),
            )
        )
        return []

    triangles: list[Triangle] = []
    elements = result.elements
    for i in range(0, result.triangle_count * VERTICES_PER_POLYGON, VERTICES_PER_POLYGON):
        triangles.append(
            (
                result.vertices[elements[i]],
                result.vertices[elements[i + 1]],
                result.vertices[elements[i + 2]],
            )
        )
    return triangles


def fan_triangulate(contour: Sequence[Point2D]) -> list[Triangle]:
    """Triangulate a contour as a fan around its first vertex.

    Args:
        contour: Contour points

    Returns:
        ``len(contour) - 2`` triangles, or none for fewer than 3 points
    """
    if len(contour) < VERTICES_PER_POLYGON:
        return []

    anchor = contour[0]
    return [(anchor, contour[i], contour[i + 1]) for i in range(1, len(contour) - 1)]

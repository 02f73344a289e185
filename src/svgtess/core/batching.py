"""Batched geometry builder.

Collects the fill triangles and stroke segments of every shape into two
interleaved vertex buffers (x, y, z, r, g, b, a) so a renderer can draw the
whole document with one draw call per buffer. Colors are flat per shape and
z is always 0.
"""

from collections.abc import Iterable, Sequence

from svgtess.core.shapes import Shape
from svgtess.domain import BatchedGeometry, Color, Point2D, Triangle


def _emit(buffer: list[float], point: Point2D, rgba: tuple[float, float, float, float]) -> None:
    buffer.extend((point.x, point.y, 0.0))
    buffer.extend(rgba)


class BatchedGeometryBuilder:
    """Builds BatchedGeometry from shapes.

    Example:
        builder = BatchedGeometryBuilder()
        geometry = builder.build(shapes)
        fill, stroke = geometry.as_arrays()
    """

    def build(self, shapes: Iterable[Shape]) -> BatchedGeometry:
        """Build fresh buffers for ``shapes``.

        Args:
            shapes: Shapes in document order

        Returns:
            New BatchedGeometry
        """
        geometry = BatchedGeometry()
        self.process_shapes(geometry, shapes)
        return geometry

    def process_shapes(self, geometry: BatchedGeometry, shapes: Iterable[Shape]) -> None:
        """Clear ``geometry`` and refill it from ``shapes``.

        Args:
            geometry: Buffers to overwrite
            shapes: Shapes in document order
        """
        geometry.clear()
        for shape in shapes:
            self.add_shape(geometry, shape)

    def add_shape(self, geometry: BatchedGeometry, shape: Shape) -> None:
        """Append one shape's fill and stroke vertices."""
        fill = shape.fill_color
        if fill is not None:
            self._add_triangles(geometry.fill_vertices, shape.fill_triangles(), fill)

        stroke = shape.stroke_color
        if stroke is not None:
            rgba = stroke.to_floats()
            for start, end in shape.stroke_segments():
                _emit(geometry.stroke_vertices, start, rgba)
                _emit(geometry.stroke_vertices, end, rgba)

    def _add_triangles(
        self,
        buffer: list[float],
        triangles: Sequence[Triangle],
        color: Color,
    ) -> None:
        rgba = color.to_floats()
        for triangle in triangles:
            for point in triangle:
                _emit(buffer, point, rgba)

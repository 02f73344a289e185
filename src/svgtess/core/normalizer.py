"""Global scene normalization.

Moves the whole scene so that its minimum corner sits at the origin while
keeping every shape's position relative to the others.

Two passes with a strict barrier between them: the minimum is computed over
every shape first, and only then is any shape translated. Interleaving the
passes would shift later shapes by a partial minimum.
"""

from collections.abc import Sequence

from svgtess.core.shapes import Shape
from svgtess.domain import Point2D


def compute_global_minimum(shapes: Sequence[Shape]) -> Point2D | None:
    """Find the per-axis minimum over all geometry points of all shapes.

    Args:
        shapes: Shapes in document order

    Returns:
        Minimum corner, or None when no shape has any geometry
    """
    min_x = float("inf")
    min_y = float("inf")
    found = False

    for shape in shapes:
        for point in shape.iter_geometry_points():
            found = True
            if point.x < min_x:
                min_x = point.x
            if point.y < min_y:
                min_y = point.y

    if not found:
        return None
    return Point2D(min_x, min_y)


def normalize_to_origin(shapes: Sequence[Shape]) -> Point2D:
    """Translate all shapes so the global minimum becomes (0, 0).

    Args:
        shapes: Shapes in document order, modified in place

    Returns:
        The offset applied to every shape, (0, 0) for an empty scene
    """
    minimum = compute_global_minimum(shapes)
    if minimum is None:
        return Point2D(0.0, 0.0)

    offset = Point2D(-minimum.x, -minimum.y)
    if offset.x == 0.0 and offset.y == 0.0:
        return offset

    for shape in shapes:
        shape.translate(offset.x, offset.y)
    return offset

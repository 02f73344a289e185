"""Geometric operations on points and contours.

This module provides the math utilities shared by the shape model and the
tessellation adapter:
- Point-in-polygon testing (ray casting algorithm)
- Winding number computation
- 4x4 homogeneous affine matrices and their application to points

Matrices follow the column-vector convention: a point p maps to M @ (x, y, 0, 1).
All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

import numpy as np

from svgtess.domain import Point2D


def point_in_polygon(point: Point2D, polygon: Sequence[Point2D]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside,
    which is the even-odd fill rule.

    Args:
        point: The point to test
        polygon: Points forming the polygon boundary (closing edge implied)

    Returns:
        True if point is inside polygon, False otherwise
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def winding_number(point: Point2D, polygon: Sequence[Point2D]) -> int:
    """Count how many times a polygon winds around a point.

    Upward edges crossing the horizontal ray to the right of the point count
    +1 when the point is on their left, downward edges count -1 when the point
    is on their right.

    Args:
        point: The point to test
        polygon: Points forming the polygon boundary (closing edge implied)

    Returns:
        Signed winding number, 0 when the point is outside
    """
    n = len(polygon)
    if n < 3:
        return 0

    wn = 0
    for i in range(n):
        a = polygon[i]
        b = polygon[(i + 1) % n]
        cross = (b.x - a.x) * (point.y - a.y) - (point.x - a.x) * (b.y - a.y)
        if a.y <= point.y:
            if b.y > point.y and cross > 0:
                wn += 1
        elif b.y <= point.y and cross < 0:
            wn -= 1

    return wn


def identity_matrix() -> np.ndarray:
    """Return the 4x4 identity transform."""
    return np.identity(4, dtype=np.float64)


def translation_matrix(dx: float, dy: float) -> np.ndarray:
    """Return a transform that moves points by (dx, dy)."""
    matrix = identity_matrix()
    matrix[0, 3] = dx
    matrix[1, 3] = dy
    return matrix


def scale_matrix(sx: float, sy: float | None = None) -> np.ndarray:
    """Return a transform that scales about the origin.

    Args:
        sx: Horizontal scale factor
        sy: Vertical scale factor (defaults to sx)
    """
    matrix = identity_matrix()
    matrix[0, 0] = sx
    matrix[1, 1] = sx if sy is None else sy
    return matrix


def rotation_matrix(degrees: float, center: Point2D | None = None) -> np.ndarray:
    """Return a counter-clockwise rotation about the z axis.

    Args:
        degrees: Rotation angle in degrees
        center: Pivot point (origin if None)

    Returns:
        4x4 rotation matrix
    """
    radians = math.radians(degrees)
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)

    matrix = identity_matrix()
    matrix[0, 0] = cos_a
    matrix[0, 1] = -sin_a
    matrix[1, 0] = sin_a
    matrix[1, 1] = cos_a

    if center is None:
        return matrix

    return (
        translation_matrix(center.x, center.y)
        @ matrix
        @ translation_matrix(-center.x, -center.y)
    )


def transform_point(matrix: np.ndarray, point: Point2D) -> Point2D:
    """Apply a 4x4 homogeneous transform to a 2D point (z = 0, w = 1)."""
    x, y, _, _ = matrix @ np.array([point.x, point.y, 0.0, 1.0])
    return Point2D(float(x), float(y))

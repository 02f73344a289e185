"""Core geometric types for flattened path geometry.

This module defines the fundamental value types used throughout svgtess:
- Point2D: An immutable 2D point
- CurvePoint: A vertex of a flattened path, optionally tagged with the
  control points of the curve segment that ended on it
- Color: An 8-bit RGBA color
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point2D:
    """A point in 2D space.

    Immutable and hashable. Equality is exact field comparison, which the
    close-path logic relies on.

    Attributes:
        x: X coordinate in user units
        y: Y coordinate in user units
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def translated(self, dx: float, dy: float) -> "Point2D":
        """Return a copy of this point moved by (dx, dy)."""
        return Point2D(self.x + dx, self.y + dy)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}


Triangle = tuple[Point2D, Point2D, Point2D]
Segment = tuple[Point2D, Point2D]


@dataclass(slots=True)
class CurvePoint:
    """A vertex on a flattened path.

    The control point fields are never rendered. They remember which control
    points produced this vertex so that a following smooth curve command can
    reflect them. Only the final sample of a Bezier segment carries them:
    cubic segments set both, quadratic segments set control_point1 only.

    Attributes:
        point: Vertex position
        control_point1: First control point of the segment ending here
        control_point2: Second control point of the cubic segment ending here
    """

    point: Point2D
    control_point1: Point2D | None = None
    control_point2: Point2D | None = None

    @property
    def has_control_points(self) -> bool:
        """True if either control point is set."""
        return self.control_point1 is not None or self.control_point2 is not None

    def translate(self, dx: float, dy: float) -> None:
        """Move the vertex and any control points by (dx, dy) in place."""
        self.point = self.point.translated(dx, dy)
        if self.control_point1 is not None:
            self.control_point1 = self.control_point1.translated(dx, dy)
        if self.control_point2 is not None:
            self.control_point2 = self.control_point2.translated(dx, dy)


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color with 8-bit channels.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        a: Alpha channel (0-255), 0 is fully transparent
    """

    r: int
    g: int
    b: int
    a: int = 255

    @property
    def is_transparent(self) -> bool:
        """True if the color has zero alpha."""
        return self.a == 0

    def with_alpha(self, a: int) -> "Color":
        """Return the same color with a different alpha channel."""
        return Color(self.r, self.g, self.b, a)

    def to_floats(self) -> tuple[float, float, float, float]:
        """Convert to normalized (r, g, b, a) floats in [0, 1].

        Returns:
            Tuple of normalized channel values
        """
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)

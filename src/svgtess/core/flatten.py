"""Curve flattening routines.

Curves are sampled at a fixed number of parameter steps over t in [0, 1],
both ends included, so a segment always yields ``segments + 1`` vertices.
Only the last sample of a Bezier segment remembers its control points; the
path interpreter reads them back to reflect control points for the smooth
curve commands.

The elliptical arc routine is a deliberate approximation, not the SVG
endpoint-to-center arc algorithm. Downstream output depends on it, so it
must stay as it is: it sweeps half a turn around the midpoint of the chord
and ignores the x-axis rotation and the large-arc flag.
"""

import math

from svgtess.domain import CurvePoint, Point2D

CURVE_SEGMENTS = 32


def cubic_point(start: Point2D, cp1: Point2D, cp2: Point2D, end: Point2D, t: float) -> Point2D:
    """Evaluate a cubic Bezier curve at parameter t (Bernstein form)."""
    u = 1.0 - t
    uu = u * u
    tt = t * t
    uuu = uu * u
    ttt = tt * t

    x = uuu * start.x + 3 * uu * t * cp1.x + 3 * u * tt * cp2.x + ttt * end.x
    y = uuu * start.y + 3 * uu * t * cp1.y + 3 * u * tt * cp2.y + ttt * end.y
    return Point2D(x, y)


def quadratic_point(start: Point2D, cp: Point2D, end: Point2D, t: float) -> Point2D:
    """Evaluate a quadratic Bezier curve at parameter t (Bernstein form)."""
    u = 1.0 - t
    x = u * u * start.x + 2 * u * t * cp.x + t * t * end.x
    y = u * u * start.y + 2 * u * t * cp.y + t * t * end.y
    return Point2D(x, y)


def flatten_cubic(
    start: Point2D,
    cp1: Point2D,
    cp2: Point2D,
    end: Point2D,
    segments: int = CURVE_SEGMENTS,
) -> list[CurvePoint]:
    """Flatten a cubic Bezier curve into evenly parameterized samples.

    Args:
        start: Curve start point (the current point)
        cp1: First control point
        cp2: Second control point
        end: Curve end point
        segments: Number of parameter steps

    Returns:
        ``segments + 1`` vertices; the last one carries both control points
    """
    samples: list[CurvePoint] = []
    for i in range(segments + 1):
        t = i / segments
        samples.append(CurvePoint(cubic_point(start, cp1, cp2, end, t)))

    samples[-1].control_point1 = cp1
    samples[-1].control_point2 = cp2
    return samples


def flatten_quadratic(
    start: Point2D,
    cp: Point2D,
    end: Point2D,
    segments: int = CURVE_SEGMENTS,
) -> list[CurvePoint]:
    """Flatten a quadratic Bezier curve into evenly parameterized samples.

    Args:
        start: Curve start point (the current point)
        cp: Control point
        end: Curve end point
        segments: Number of parameter steps

    Returns:
        ``segments + 1`` vertices; the last one carries the control point
        as control_point1
    """
    samples: list[CurvePoint] = []
    for i in range(segments + 1):
        t = i / segments
        samples.append(CurvePoint(quadratic_point(start, cp, end, t)))

    samples[-1].control_point1 = cp
    return samples


def reflect_control_point(control: Point2D, about: Point2D) -> Point2D:
    """Mirror a control point through another point (2 * about - control)."""
    return Point2D(2 * about.x - control.x, 2 * about.y - control.y)


def flatten_arc(
    start: Point2D,
    end: Point2D,
    rx: float,
    ry: float,
    x_axis_rotation: float,  # noqa: ARG001
    large_arc: bool,  # noqa: ARG001
    sweep: bool,
    segments: int = CURVE_SEGMENTS,
) -> list[CurvePoint]:
    """Approximate an elliptical arc with a half-turn sweep.

    The midpoint of start and end is used as the arc center and the samples
    follow ``center + (rx * cos(a), ry * sin(a))`` for a in [0, pi] (sweep)
    or [0, -pi] (no sweep). Rotation and the large-arc flag are accepted for
    signature compatibility with the path command but have no effect.

    Args:
        start: Current point
        end: Arc end point as given by the command
        rx: Horizontal radius
        ry: Vertical radius
        x_axis_rotation: Ignored
        large_arc: Ignored
        sweep: Sweep direction flag
        segments: Number of angular steps

    Returns:
        ``segments + 1`` plain vertices
    """
    center_x = (start.x + end.x) / 2
    center_y = (start.y + end.y) / 2
    direction = 1.0 if sweep else -1.0

    samples: list[CurvePoint] = []
    for i in range(segments + 1):
        angle = (i / segments) * math.pi * direction
        samples.append(
            CurvePoint(Point2D(center_x + rx * math.cos(angle), center_y + ry * math.sin(angle)))
        )
    return samples


def sample_ellipse(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    segments: int = CURVE_SEGMENTS,
) -> list[Point2D]:
    """Sample a full ellipse starting at angle 0.

    Returns:
        ``segments + 1`` points; the last repeats the first angle so the
        outline is explicitly closed
    """
    points: list[Point2D] = []
    for i in range(segments + 1):
        angle = 2 * math.pi * i / segments
        points.append(Point2D(cx + rx * math.cos(angle), cy + ry * math.sin(angle)))
    return points

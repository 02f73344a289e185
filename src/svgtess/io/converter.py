"""Converters from document elements to shapes.

This module turns the raw attribute strings of a ShapeElement into a Shape
from the geometry core, resolving the element's paint on the way.
"""

import math

from svgtess.config import SvgTessSettings, get_default_settings
from svgtess.core.shapes import (
    FilledPathShape,
    PathShape,
    Shape,
    create_circle,
    create_ellipse,
    create_rectangle,
)
from svgtess.core.style import combined_opacity, parse_style_declarations, resolve_style
from svgtess.domain import ElementKind, ShapeElement, Style
from svgtess.utils.diagnostics import AnomalyKind, DiagnosticsSink, anomaly, default_sink


def _number(
    element: ShapeElement,
    name: str,
    sink: DiagnosticsSink,
    default: float = 0.0,
) -> float:
    """Read a numeric attribute, substituting ``default`` when missing or bad."""
    raw = element.get(name)
    if raw is None:
        return default

    try:
        value = float(raw.strip())
    except ValueError:
        value = math.nan

    if not math.isfinite(value):
        sink.report(
            anomaly(
                AnomalyKind.MALFORMED_INPUT,
                "Unparseable numeric attribute",
                element=element.label,
                attribute=name,
                value=raw,
            )
        )
        return default
    return value


def element_style(element: ShapeElement, sink: DiagnosticsSink | None = None) -> Style:
    """Resolve the paint of an element.

    The element's ``opacity`` attribute and the style's ``opacity``
    declaration multiply together and scale both paints.

    Args:
        element: Source element
        sink: Receiver for recoverable anomalies

    Returns:
        Resolved Style
    """
    sink = default_sink(sink)
    declarations = parse_style_declarations(element.style)
    opacity = combined_opacity(element.get("opacity"), declarations, sink)
    return resolve_style(element.style, opacity, sink)


def element_to_shape(
    element: ShapeElement,
    settings: SvgTessSettings | None = None,
    sink: DiagnosticsSink | None = None,
) -> Shape | None:
    """Convert a document element to a shape.

    A path whose style carries a parseable fill other than ``none`` becomes a
    FilledPathShape, any other path a stroke-only PathShape.

    Args:
        element: Element extracted by SvgReader
        settings: Flattening and tessellation settings (defaults if None)
        sink: Receiver for recoverable anomalies

    Returns:
        The shape, or None when the element carries no geometry (a path
        without path data)
    """
    settings = settings if settings is not None else get_default_settings()
    sink = default_sink(sink)
    style = element_style(element, sink)
    ellipse_segments = settings.flattening.ellipse_segments

    if element.kind == ElementKind.RECT:
        return create_rectangle(
            _number(element, "x", sink),
            _number(element, "y", sink),
            _number(element, "width", sink),
            _number(element, "height", sink),
            style=style,
            label=element.label,
        )

    if element.kind == ElementKind.CIRCLE:
        return create_circle(
            _number(element, "cx", sink),
            _number(element, "cy", sink),
            _number(element, "r", sink),
            ellipse_segments,
            style=style,
            label=element.label,
        )

    if element.kind == ElementKind.ELLIPSE:
        return create_ellipse(
            _number(element, "cx", sink),
            _number(element, "cy", sink),
            _number(element, "rx", sink),
            _number(element, "ry", sink),
            ellipse_segments,
            style=style,
            label=element.label,
        )

    return _path_to_shape(element, style, settings, sink)


def _path_to_shape(
    element: ShapeElement,
    style: Style,
    settings: SvgTessSettings,
    sink: DiagnosticsSink,
) -> PathShape | None:
    path_data = element.get("d")
    if not path_data:
        sink.report(
            anomaly(
                AnomalyKind.EMPTY_OR_MISSING_DATA,
                "Path has no path data",
                element=element.label,
            )
        )
        return None

    curve_segments = settings.flattening.curve_segments
    shape: PathShape
    if style.fill_color is not None:
        shape = FilledPathShape(
            style=style,
            label=element.label,
            curve_segments=curve_segments,
            winding_rule=settings.tessellation.winding_rule,
            closure_tolerance=settings.tessellation.closure_tolerance,
            sink=sink,
        )
    else:
        shape = PathShape(
            style=style,
            label=element.label,
            curve_segments=curve_segments,
            sink=sink,
        )

    shape.parse_path_data(path_data)
    return shape

"""Style declaration resolver.

Parses the CSS-like ``style`` attribute (``key:value;key:value``) into a
Style. Only ``fill``, ``stroke``, ``stroke-width`` and ``opacity`` are
interpreted. Opacity scales the alpha channel of both paints.
"""

import math
import re

from svgtess.core._colors import SVG_COLORS, TRANSPARENT
from svgtess.domain import Color, Style
from svgtess.utils.diagnostics import AnomalyKind, DiagnosticsSink, anomaly, default_sink

_HEX_RE = re.compile(r"#([0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})")
NONE_VALUE = "none"


def parse_style_declarations(style: str | None) -> dict[str, str]:
    """Split a style attribute into trimmed key/value pairs.

    Pairs that do not split into exactly one key and one value are ignored.

    Args:
        style: Raw style attribute text

    Returns:
        Mapping of declaration name to value

    Examples:
        >>> parse_style_declarations("fill:#ff0000; stroke-width: 2")
        {'fill': '#ff0000', 'stroke-width': '2'}
    """
    result: dict[str, str] = {}
    if not style:
        return result

    for pair in style.split(";"):
        parts = [part for part in pair.split(":") if part]
        if len(parts) == 2:
            result[parts[0].strip()] = parts[1].strip()
    return result


def _alpha(opacity: float) -> int:
    return max(0, min(255, int(opacity * 255)))


def _parse_float(value: str) -> float | None:
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def parse_color(
    value: str | None,
    opacity: float = 1.0,
    sink: DiagnosticsSink | None = None,
) -> Color | None:
    """Parse a paint value into a color.

    Hex colors always take their alpha from the opacity. Named colors keep
    full alpha unless the opacity is below 1.

    Args:
        value: ``#RRGGBB``, ``#RGB``, a color keyword or ``none``
        opacity: Opacity multiplier in [0, 1]
        sink: Receiver for unparseable-color diagnostics

    Returns:
        The color, or None for empty, ``none`` or unparseable values
    """
    if value is None:
        return None

    text = value.strip()
    if not text or text.lower() == NONE_VALUE:
        return None

    match = _HEX_RE.fullmatch(text)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        rgb = int(digits, 16)
        return Color((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF, _alpha(opacity))

    name = text.lower()
    if name == TRANSPARENT:
        return Color(0, 0, 0, 0)

    if name in SVG_COLORS:
        rgb = int(SVG_COLORS[name][1:], 16)
        color = Color((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)
        if opacity < 1.0:
            return color.with_alpha(_alpha(opacity))
        return color

    default_sink(sink).report(
        anomaly(AnomalyKind.MALFORMED_INPUT, "Unrecognized color", value=text)
    )
    return None


def parse_opacity(declarations: dict[str, str], sink: DiagnosticsSink | None = None) -> float:
    """Read the ``opacity`` declaration.

    Returns:
        The declared opacity, or 1.0 when absent or unparseable
    """
    raw = declarations.get("opacity")
    if raw is None:
        return 1.0

    opacity = _parse_float(raw)
    if opacity is None:
        default_sink(sink).report(
            anomaly(AnomalyKind.MALFORMED_INPUT, "Unparseable opacity", value=raw)
        )
        return 1.0
    return opacity


def combined_opacity(
    element_opacity: str | None,
    declarations: dict[str, str],
    sink: DiagnosticsSink | None = None,
) -> float:
    """Multiply the element ``opacity`` attribute with the style opacity.

    Both factors default to 1.0.
    """
    opacity = 1.0
    if element_opacity is not None:
        parsed = _parse_float(element_opacity)
        if parsed is None:
            default_sink(sink).report(
                anomaly(
                    AnomalyKind.MALFORMED_INPUT,
                    "Unparseable opacity attribute",
                    value=element_opacity,
                )
            )
        else:
            opacity = parsed
    return opacity * parse_opacity(declarations, sink)


def resolve_style(
    style: str | None,
    opacity: float = 1.0,
    sink: DiagnosticsSink | None = None,
) -> Style:
    """Resolve a style attribute into fill and stroke paint.

    Args:
        style: Raw style attribute text
        opacity: Combined opacity multiplier applied to both paints
        sink: Receiver for recoverable anomalies

    Returns:
        Resolved Style (default stroke width 1)
    """
    declarations = parse_style_declarations(style)

    fill_value = declarations.get("fill")
    stroke_value = declarations.get("stroke")

    stroke_width = 1.0
    raw_width = declarations.get("stroke-width")
    if raw_width is not None:
        parsed = _parse_float(raw_width)
        if parsed is None:
            default_sink(sink).report(
                anomaly(AnomalyKind.MALFORMED_INPUT, "Unparseable stroke width", value=raw_width)
            )
        else:
            stroke_width = max(0.0, parsed)

    return Style(
        fill_color=parse_color(fill_value, opacity, sink),
        stroke_color=parse_color(stroke_value, opacity, sink),
        stroke_width=stroke_width,
        fill_none=fill_value is not None and fill_value.strip().lower() == NONE_VALUE,
        stroke_none=stroke_value is not None and stroke_value.strip().lower() == NONE_VALUE,
    )

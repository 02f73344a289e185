"""Paint style of a shape."""

from dataclasses import dataclass

from svgtess.domain.primitives import Color


@dataclass(frozen=True)
class Style:
    """Resolved fill and stroke paint of a shape.

    An explicit ``none`` value is kept apart from an absent declaration
    through the ``fill_none`` and ``stroke_none`` flags. Both states mean the
    channel is not painted.

    Attributes:
        fill_color: Fill color, None when unset, ``none`` or unparseable
        stroke_color: Stroke color, None when unset, ``none`` or unparseable
        stroke_width: Stroke width in user units (>= 0)
        fill_none: True if the declaration said ``fill:none``
        stroke_none: True if the declaration said ``stroke:none``
    """

    fill_color: Color | None = None
    stroke_color: Color | None = None
    stroke_width: float = 1.0
    fill_none: bool = False
    stroke_none: bool = False

    @property
    def has_fill(self) -> bool:
        """True if the fill channel should be painted."""
        return self.fill_color is not None and not self.fill_color.is_transparent

    @property
    def has_stroke(self) -> bool:
        """True if the stroke channel should be painted."""
        return (
            self.stroke_color is not None
            and not self.stroke_color.is_transparent
            and self.stroke_width > 0
        )

"""Shape elements extracted from an SVG document.

The document reader does not interpret geometry. It hands each shape element
over as plain strings so the converter can build shapes from them.
"""

from dataclasses import dataclass, field
from enum import Enum


class ElementKind(str, Enum):
    """Supported shape element types."""

    RECT = "rect"
    PATH = "path"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"


@dataclass
class ShapeElement:
    """A shape element as found in the document.

    Attributes:
        kind: Element type
        attributes: Raw attribute values keyed by local attribute name
        style: Raw ``style`` attribute, None if absent
        element_id: Value of the ``id`` attribute, None if absent
    """

    kind: ElementKind
    attributes: dict[str, str] = field(default_factory=dict)
    style: str | None = None
    element_id: str | None = None

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return a raw attribute value."""
        return self.attributes.get(name, default)

    @property
    def label(self) -> str:
        """Human-readable element label for logs, e.g. ``path#heart``."""
        if self.element_id:
            return f"{self.kind.value}#{self.element_id}"
        return self.kind.value

"""Exception hierarchy for svgtess.

The geometry core never raises for malformed path or style data; those
anomalies are reported to a diagnostics sink and recovered locally. The
exceptions below are reserved for the I/O seams and the tessellator facade.
"""


class SvgTessError(Exception):
    """Base exception for all svgtess errors."""

    pass


class DocumentError(SvgTessError):
    """Errors related to loading an SVG document."""

    pass


class DocumentLoadError(DocumentError):
    """Error loading a document file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document '{path}': {reason}")


class DocumentFormatError(DocumentError):
    """Document is not well-formed XML or not an SVG document."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid document format '{path}': {details}")


class GeometryError(SvgTessError):
    """Errors in geometric calculations."""

    pass


class TessellationError(GeometryError):
    """The external tessellator could not triangulate a contour."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Tessellation failed: {reason}")


class ExportError(SvgTessError):
    """Errors related to writing batched geometry."""

    pass


class GeometrySaveError(ExportError):
    """Error saving a geometry file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save geometry '{path}': {reason}")

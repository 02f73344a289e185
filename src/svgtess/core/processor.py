"""Processing orchestration for the svgtess pipeline.

This module coordinates the full document workflow: load the document,
convert its elements to shapes, normalize the scene, batch the geometry and
optionally write it out.

Key components:
- ProcessingResult: Everything a caller needs after a run
- DocumentProcessor: Main orchestrator class for document processing

Processing is single-threaded. Normalization has a hard barrier between
computing the scene minimum and translating shapes, and batching needs the
translated shapes, so the stages run strictly one after another.
"""

import time
import traceback
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from svgtess.config import SvgTessSettings
from svgtess.core.batching import BatchedGeometryBuilder
from svgtess.core.normalizer import normalize_to_origin
from svgtess.core.shapes import Shape
from svgtess.domain import BatchedGeometry, Point2D
from svgtess.io.converter import element_to_shape
from svgtess.io.reader import SvgReader
from svgtess.io.writer import GeometryWriter, get_geometry_path
from svgtess.utils import (
    BuildLogger,
    BuildStats,
    CollectingDiagnosticsSink,
    DiagnosticsSink,
    FanoutDiagnosticsSink,
    LoggingDiagnosticsSink,
)


@dataclass
class ProcessingResult:
    """Outcome of processing a document.

    Attributes:
        shapes: Shapes in document order (normalized if enabled)
        geometry: Batched fill and stroke buffers
        offset: Translation applied by the normalizer
        stats: Build statistics
        dimensions: Document width and height in pixels
        view_box: Document viewBox
        output_path: File written, None if nothing was written
    """

    shapes: list[Shape] = field(default_factory=list)
    geometry: BatchedGeometry = field(default_factory=BatchedGeometry)
    offset: Point2D = field(default_factory=lambda: Point2D(0.0, 0.0))
    stats: BuildStats = field(default_factory=BuildStats)
    dimensions: tuple[float, float] | None = None
    view_box: tuple[float, float, float, float] | None = None
    output_path: Path | None = None


class DocumentProcessor:
    """Orchestrates document processing.

    Manages the complete workflow:
    1. Load the SVG document
    2. Convert shape elements to shapes, in document order
    3. Normalize the scene to the origin
    4. Batch fill triangles and stroke segments
    5. Save the geometry

    Example:
        processor = DocumentProcessor(SvgTessSettings())
        result = processor.process(Path("drawing.svg"))
        print(result.geometry.triangle_count)
    """

    def __init__(self, settings: SvgTessSettings, sink: DiagnosticsSink | None = None) -> None:
        """Initialize the processor.

        Args:
            settings: Flattening, tessellation and normalization settings
            sink: Receiver for recoverable anomalies (logged if None)
        """
        self.settings = settings
        self.logger = structlog.get_logger("svgtess")
        self._collector = CollectingDiagnosticsSink()
        self._sink = FanoutDiagnosticsSink(
            sink if sink is not None else LoggingDiagnosticsSink(self.logger),
            self._collector,
        )
        self.build_logger = BuildLogger(self.logger)
        self.builder = BatchedGeometryBuilder()
        self._dimensions: tuple[float, float] | None = None
        self._view_box: tuple[float, float, float, float] | None = None

    @property
    def anomaly_count(self) -> int:
        """Number of anomalies reported since the last process() call."""
        return len(self._collector)

    def load_shapes(self, svg_path: Path) -> list[Shape]:
        """Load a document and convert its elements to shapes.

        An element that fails unexpectedly is logged and skipped; the other
        elements are still converted.

        Args:
            svg_path: Path to the SVG file

        Returns:
            Shapes in document order

        Raises:
            FileNotFoundError: If the file does not exist
            DocumentFormatError: If the file is not a readable SVG document
        """
        shapes: list[Shape] = []

        with SvgReader(svg_path) as reader:
            self._dimensions = reader.dimensions
            self._view_box = reader.view_box

            self.logger.info(
                "Document loaded",
                input=str(svg_path),
                width=self._dimensions[0],
                height=self._dimensions[1],
            )

            for element in reader.iter_elements():
                try:
                    shape = element_to_shape(element, self.settings, self._sink)
                except Exception as e:
                    self.build_logger.log_shape_error(
                        label=element.label,
                        error=e,
                        traceback=traceback.format_exc(),
                    )
                    continue

                if shape is None:
                    self.build_logger.log_shape_skipped(element.label, "no geometry")
                    continue

                self.build_logger.log_shape_built(
                    label=shape.label,
                    vertex_count=shape.vertex_count,
                    filled=shape.fill_color is not None,
                    stroked=shape.stroke_color is not None,
                )
                shapes.append(shape)

        return shapes

    def build(self, shapes: Sequence[Shape]) -> ProcessingResult:
        """Normalize and batch already loaded shapes.

        Args:
            shapes: Shapes in document order, modified in place by
                normalization

        Returns:
            ProcessingResult with the batched geometry
        """
        stats = self.build_logger.stats
        if stats.start_time is None:
            stats.start_time = time.time()

        offset = Point2D(0.0, 0.0)
        if self.settings.normalization.enabled:
            offset = normalize_to_origin(shapes)
            self.build_logger.log_normalization(offset.x, offset.y, len(shapes))

        geometry = self.builder.build(shapes)

        stats.triangle_count = geometry.triangle_count
        stats.segment_count = geometry.segment_count
        stats.anomaly_count = self.anomaly_count
        stats.end_time = time.time()

        self.logger.info(
            "Geometry batched",
            shapes=len(shapes),
            triangles=stats.triangle_count,
            segments=stats.segment_count,
            anomalies=stats.anomaly_count,
        )

        return ProcessingResult(
            shapes=list(shapes),
            geometry=geometry,
            offset=offset,
            stats=stats,
            dimensions=self._dimensions,
            view_box=self._view_box,
        )

    def process(
        self,
        svg_path: Path,
        output_path: Path | None = None,
        write: bool = True,
    ) -> ProcessingResult:
        """Run the whole pipeline on a document.

        Args:
            svg_path: Path to the SVG file
            output_path: Geometry output (``<stem>-geometry.json`` if None)
            write: If False, build the geometry without saving it

        Returns:
            ProcessingResult with counts, geometry and timing

        Raises:
            FileNotFoundError: If the file does not exist
            DocumentFormatError: If the file is not a readable SVG document
            GeometrySaveError: If the output cannot be written
        """
        self.build_logger.reset()
        self._collector.clear()
        self.build_logger.stats.start_time = time.time()

        self.logger.info("Starting document processing", input=str(svg_path))

        shapes = self.load_shapes(svg_path)
        result = self.build(shapes)

        if write:
            if output_path is None:
                output_path = get_geometry_path(svg_path)

            GeometryWriter(result.geometry, output_path).save(
                {
                    "source": svg_path.name,
                    "dimensions": list(result.dimensions) if result.dimensions else None,
                    "view_box": list(result.view_box) if result.view_box else None,
                    "offset": result.offset.to_dict(),
                    "shape_count": len(result.shapes),
                }
            )
            result.output_path = output_path

            self.logger.info("Geometry saved", output=str(output_path))

        self.logger.info(
            "Processing complete",
            shapes=result.stats.shape_count,
            skipped=result.stats.skipped_count,
            errors=result.stats.error_count,
            duration_seconds=round(result.stats.duration_seconds, 3),
        )

        return result

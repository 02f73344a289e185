"""Unit tests for DocumentProcessor."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from svgtess.config import NormalizationConfig, SvgTessSettings
from svgtess.core.processor import DocumentProcessor, ProcessingResult
from svgtess.domain import Point2D
from svgtess.exceptions import DocumentFormatError
from svgtess.utils.diagnostics import AnomalyKind, CollectingDiagnosticsSink

DOCUMENT = """<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100">
  <rect x="10" y="20" width="30" height="40" style="fill:#ff0000"/>
  <g>
    <path d="M50,50 L70,50 L60,70 Z" style="fill:none;stroke:blue;stroke-width:2"/>
  </g>
  <path style="fill:red"/>
  <circle cx="100" cy="50" r="10" style="fill:green;stroke:black"/>
</svg>
"""


@pytest.fixture
def svg_file(tmp_path) -> Path:
    """A small document with every element kind."""
    path = tmp_path / "scene.svg"
    path.write_text(DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def sink() -> CollectingDiagnosticsSink:
    """Collecting diagnostics sink."""
    return CollectingDiagnosticsSink()


class TestDocumentProcessor:
    """Tests for DocumentProcessor."""

    def test_load_shapes(self, svg_file, sink) -> None:
        """Test elements become shapes in document order."""
        processor = DocumentProcessor(SvgTessSettings(), sink)
        shapes = processor.load_shapes(svg_file)
        assert [shape.label for shape in shapes] == ["rect", "path", "circle"]
        assert processor.build_logger.stats.skipped_count == 1
        assert len(sink.of_kind(AnomalyKind.EMPTY_OR_MISSING_DATA)) == 1
        assert processor.anomaly_count == 1

    def test_build_normalizes(self, svg_file, sink) -> None:
        """Test the scene is moved to the origin before batching."""
        processor = DocumentProcessor(SvgTessSettings(), sink)
        result = processor.build(processor.load_shapes(svg_file))

        assert isinstance(result, ProcessingResult)
        assert result.offset == Point2D(-10, -20)
        xs = result.geometry.fill_vertices[0::7] + result.geometry.stroke_vertices[0::7]
        ys = result.geometry.fill_vertices[1::7] + result.geometry.stroke_vertices[1::7]
        assert min(xs) == pytest.approx(0.0)
        assert min(ys) == pytest.approx(0.0)

    def test_build_without_normalization(self, svg_file, sink) -> None:
        """Test disabled normalization keeps document coordinates."""
        settings = SvgTessSettings(normalization=NormalizationConfig(enabled=False))
        processor = DocumentProcessor(settings, sink)
        result = processor.build(processor.load_shapes(svg_file))
        assert result.offset == Point2D(0, 0)
        assert min(result.geometry.fill_vertices[0::7]) == pytest.approx(10.0)

    def test_stats(self, svg_file, sink) -> None:
        """Test counts are filled in after a build."""
        processor = DocumentProcessor(SvgTessSettings(), sink)
        result = processor.process(svg_file, write=False)
        stats = result.stats
        assert stats.shape_count == 3
        assert stats.filled_count == 2
        assert stats.stroked_count == 2
        assert stats.triangle_count == result.geometry.triangle_count > 0
        assert stats.segment_count == result.geometry.segment_count > 0
        assert result.output_path is None

    def test_stats_reset_between_runs(self, svg_file, sink) -> None:
        """Test a second run on the same processor reports its own counts."""
        processor = DocumentProcessor(SvgTessSettings(), sink)
        first = processor.process(svg_file, write=False).stats
        second = processor.process(svg_file, write=False).stats

        for stats in (first, second):
            assert stats.shape_count == 3
            assert stats.skipped_count == 1
            assert stats.anomaly_count == 1
        assert second is not first
        assert processor.anomaly_count == 1
        assert len(sink) == 2

    def test_document_properties(self, svg_file, sink) -> None:
        """Test dimensions and viewBox are carried into the result."""
        result = DocumentProcessor(SvgTessSettings(), sink).process(svg_file, write=False)
        assert result.dimensions == (200.0, 100.0)
        assert result.view_box == (0.0, 0.0, 200.0, 100.0)

    def test_process_writes_default_path(self, svg_file, sink) -> None:
        """Test output lands next to the input by default."""
        result = DocumentProcessor(SvgTessSettings(), sink).process(svg_file)
        expected = svg_file.parent / "scene-geometry.json"
        assert result.output_path == expected
        document = json.loads(expected.read_text(encoding="utf-8"))
        assert document["metadata"]["source"] == "scene.svg"
        assert document["metadata"]["shape_count"] == 3
        assert document["metadata"]["offset"] == {"x": -10.0, "y": -20.0}

    def test_process_explicit_npz(self, svg_file, tmp_path, sink) -> None:
        """Test an explicit .npz output path."""
        output = tmp_path / "scene.npz"
        DocumentProcessor(SvgTessSettings(), sink).process(svg_file, output_path=output)
        assert output.exists()

    def test_element_failure_skipped(self, svg_file, sink) -> None:
        """Test an unexpected conversion error skips only that element."""
        from svgtess.io import converter

        real = converter.element_to_shape

        def flaky(element, settings=None, diagnostics=None):
            if element.kind.value == "circle":
                raise ValueError("boom")
            return real(element, settings, diagnostics)

        processor = DocumentProcessor(SvgTessSettings(), sink)
        with patch("svgtess.core.processor.element_to_shape", side_effect=flaky):
            shapes = processor.load_shapes(svg_file)

        assert [shape.label for shape in shapes] == ["rect", "path"]
        assert processor.build_logger.stats.error_count == 1
        assert processor.build_logger.stats.errors == [("circle", "boom")]

    def test_missing_file(self, tmp_path, sink) -> None:
        """Test a missing document raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            DocumentProcessor(SvgTessSettings(), sink).process(tmp_path / "nope.svg")

    def test_malformed_document(self, tmp_path, sink) -> None:
        """Test a broken document raises DocumentFormatError."""
        path = tmp_path / "bad.svg"
        path.write_text("<svg>", encoding="utf-8")
        with pytest.raises(DocumentFormatError):
            DocumentProcessor(SvgTessSettings(), sink).process(path)

    def test_empty_document(self, tmp_path, sink) -> None:
        """Test a document without shapes gives empty geometry."""
        path = tmp_path / "empty.svg"
        path.write_text('<svg xmlns="http://www.w3.org/2000/svg"/>', encoding="utf-8")
        result = DocumentProcessor(SvgTessSettings(), sink).process(path, write=False)
        assert result.shapes == []
        assert result.geometry.is_empty()
        assert result.offset == Point2D(0, 0)

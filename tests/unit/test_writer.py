"""Unit tests for the geometry writer."""

import json
from pathlib import Path

import numpy as np
import pytest

from svgtess.domain import FLOATS_PER_VERTEX, BatchedGeometry
from svgtess.exceptions import GeometrySaveError
from svgtess.io.writer import GeometryWriter, get_geometry_path

FILL_VERTEX = [1.0, 2.0, 0.0, 1.0, 0.0, 0.0, 1.0]
STROKE_VERTEX = [3.0, 4.0, 0.0, 0.0, 0.0, 1.0, 0.5]


@pytest.fixture
def geometry() -> BatchedGeometry:
    """One fill triangle and one stroke segment."""
    return BatchedGeometry(
        fill_vertices=FILL_VERTEX * 3,
        stroke_vertices=STROKE_VERTEX * 2,
    )


class TestGetGeometryPath:
    """Tests for the default output path."""

    def test_suffix(self) -> None:
        """Test the default name sits next to the input."""
        assert get_geometry_path(Path("art/logo.svg")) == Path("art/logo-geometry.json")

    def test_static_alias(self) -> None:
        """Test the static method matches the module function."""
        path = Path("a.svg")
        assert GeometryWriter.get_geometry_path(path) == get_geometry_path(path)


class TestGeometryWriter:
    """Tests for GeometryWriter."""

    def test_json(self, tmp_path, geometry) -> None:
        """Test JSON output holds counts, buffers and metadata."""
        output = tmp_path / "out.json"
        GeometryWriter(geometry, output).save({"source": "doc.svg"})

        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["stride"] == FLOATS_PER_VERTEX
        assert document["fill"]["vertex_count"] == 3
        assert document["fill"]["vertices"] == FILL_VERTEX * 3
        assert document["stroke"]["vertex_count"] == 2
        assert document["metadata"] == {"source": "doc.svg"}

    def test_json_without_metadata(self, tmp_path) -> None:
        """Test empty geometry still writes a valid document."""
        output = tmp_path / "empty.json"
        GeometryWriter(BatchedGeometry(), output).save()
        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["fill"]["vertices"] == []
        assert document["metadata"] == {}

    def test_npz(self, tmp_path, geometry) -> None:
        """Test .npz output holds (n, 7) float32 arrays."""
        output = tmp_path / "out.npz"
        GeometryWriter(geometry, output).save({"shape_count": 2})

        with np.load(output) as archive:
            assert archive["fill"].shape == (3, FLOATS_PER_VERTEX)
            assert archive["fill"].dtype == np.float32
            assert archive["stroke"].shape == (2, FLOATS_PER_VERTEX)
            assert archive["stroke"][0].tolist() == pytest.approx(STROKE_VERTEX)
            assert json.loads(str(archive["metadata"])) == {"shape_count": 2}

    def test_save_error(self, tmp_path, geometry) -> None:
        """Test an unwritable path raises GeometrySaveError."""
        output = tmp_path / "missing" / "out.json"
        with pytest.raises(GeometrySaveError) as exc_info:
            GeometryWriter(geometry, output).save()
        assert exc_info.value.path == str(output)

    def test_unserializable_metadata(self, tmp_path, geometry) -> None:
        """Test metadata that is not JSON raises GeometrySaveError."""
        output = tmp_path / "out.json"
        with pytest.raises(GeometrySaveError):
            GeometryWriter(geometry, output).save({"bad": object()})

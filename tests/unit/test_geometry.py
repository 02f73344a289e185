"""Unit tests for geometric helpers and affine matrices."""

import pytest

from svgtess.core.geometry import (
    identity_matrix,
    point_in_polygon,
    rotation_matrix,
    scale_matrix,
    transform_point,
    translation_matrix,
    winding_number,
)
from svgtess.domain import Point2D

SQUARE = [Point2D(0, 0), Point2D(10, 0), Point2D(10, 10), Point2D(0, 10)]


class TestContainment:
    """Tests for point_in_polygon and winding_number."""

    def test_inside_and_outside(self) -> None:
        """Test ray casting inside and outside a square."""
        assert point_in_polygon(Point2D(5, 5), SQUARE)
        assert not point_in_polygon(Point2D(15, 5), SQUARE)

    def test_winding_sign_follows_orientation(self) -> None:
        """Test the winding number sign flips with orientation."""
        assert winding_number(Point2D(5, 5), SQUARE) == 1
        assert winding_number(Point2D(5, 5), list(reversed(SQUARE))) == -1
        assert winding_number(Point2D(15, 5), SQUARE) == 0

    def test_double_loop(self) -> None:
        """Test a contour circling twice winds twice."""
        assert winding_number(Point2D(5, 5), SQUARE + SQUARE) == 2


class TestMatrices:
    """Tests for 4x4 homogeneous transforms."""

    def test_identity(self) -> None:
        """Test the identity leaves points alone."""
        assert transform_point(identity_matrix(), Point2D(3, 4)) == Point2D(3, 4)

    def test_translation(self) -> None:
        """Test translation moves points."""
        assert transform_point(translation_matrix(5, -2), Point2D(1, 1)) == Point2D(6, -1)

    def test_scale(self) -> None:
        """Test uniform and non-uniform scaling."""
        assert transform_point(scale_matrix(2), Point2D(1, 3)) == Point2D(2, 6)
        assert transform_point(scale_matrix(2, 3), Point2D(1, 1)) == Point2D(2, 3)

    def test_rotation(self) -> None:
        """Test a quarter turn counter-clockwise."""
        p = transform_point(rotation_matrix(90), Point2D(1, 0))
        assert p.x == pytest.approx(0.0, abs=1e-12)
        assert p.y == pytest.approx(1.0)

    def test_rotation_about_center(self) -> None:
        """Test rotation keeps the pivot fixed."""
        center = Point2D(5, 5)
        p = transform_point(rotation_matrix(180, center), Point2D(10, 5))
        assert p.x == pytest.approx(0.0, abs=1e-12)
        assert p.y == pytest.approx(5.0)

    def test_composition(self) -> None:
        """Test column-vector composition applies the right matrix first."""
        matrix = translation_matrix(10, 0) @ scale_matrix(2)
        assert transform_point(matrix, Point2D(1, 1)) == Point2D(12, 2)

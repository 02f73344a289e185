"""Unit tests for the path command interpreter.

These cover coordinate resolution, implicit repetition, smooth curve
reflection, close-path behavior and recovery from malformed arguments.
"""

import pytest

from svgtess.core.flatten import CURVE_SEGMENTS, flatten_arc
from svgtess.core.interpreter import PathInterpreter
from svgtess.core.path_parser import PathCommand, parse_path_data
from svgtess.domain import Point2D
from svgtess.utils.diagnostics import AnomalyKind, CollectingDiagnosticsSink


@pytest.fixture
def sink() -> CollectingDiagnosticsSink:
    """Collecting diagnostics sink."""
    return CollectingDiagnosticsSink()


def run(path_data: str, sink=None, segments: int = CURVE_SEGMENTS) -> list[Point2D]:
    """Interpret path data and return the vertex positions."""
    interpreter = PathInterpreter(curve_segments=segments, sink=sink)
    return [v.point for v in interpreter.interpret(parse_path_data(path_data, sink))]


def approx_points(points: list[Point2D]) -> list:
    """Wrap positions for approximate comparison against tuples."""
    return [pytest.approx(p.to_tuple()) for p in points]


def tuples(points: list[Point2D]) -> list[tuple[float, float]]:
    """Convert positions to plain tuples."""
    return [p.to_tuple() for p in points]


class TestLines:
    """Tests for move-to and line commands."""

    def test_closed_triangle(self, sink) -> None:
        """Test Z appends a copy of the subpath start."""
        points = run("M0,0 L10,0 L10,10 Z", sink)
        assert points == [Point2D(0, 0), Point2D(10, 0), Point2D(10, 10), Point2D(0, 0)]
        assert len(sink) == 0

    def test_relative_equals_absolute(self, sink) -> None:
        """Test relative commands resolve against the current point."""
        assert run("m0,0 l10,0 l0,10", sink) == run("M0,0 L10,0 L10,10", sink)

    def test_relative_first_move_from_origin(self) -> None:
        """Test an initial relative move is relative to the origin."""
        assert run("m5,5 l1,1") == [Point2D(5, 5), Point2D(6, 6)]

    def test_horizontal_and_vertical(self) -> None:
        """Test H and V keep the other coordinate."""
        assert run("M1,2 H10 V20 h-5 v-5") == [
            Point2D(1, 2),
            Point2D(10, 2),
            Point2D(10, 20),
            Point2D(5, 20),
            Point2D(5, 15),
        ]

    def test_implicit_line_repetition(self) -> None:
        """Test extra argument pairs repeat the line command."""
        assert run("M0 0 L1 1 2 2 3 3") == [
            Point2D(0, 0),
            Point2D(1, 1),
            Point2D(2, 2),
            Point2D(3, 3),
        ]

    def test_move_with_extra_pairs(self) -> None:
        """Test pairs after the first one of a move-to are line-tos."""
        interpreter = PathInterpreter()
        vertices = interpreter.interpret(parse_path_data("M0 0 10 0 10 10 Z"))
        assert [v.point for v in vertices] == [
            Point2D(0, 0),
            Point2D(10, 0),
            Point2D(10, 10),
            Point2D(0, 0),
        ]
        assert interpreter.subpath_start == 0

    def test_relative_repetition_chains(self) -> None:
        """Test each repeated relative group uses the updated current point."""
        assert run("m0 0 l1 0 1 0 1 0")[-1] == Point2D(3, 0)


class TestClosePath:
    """Tests for close-path handling."""

    def test_close_is_idempotent(self, sink) -> None:
        """Test Z does nothing when already at the subpath start."""
        points = run("M0,0 L10,0 L10,10 L0,0 Z", sink)
        assert len(points) == 4
        assert run("M0,0 L10,0 L10,10 Z Z") == run("M0,0 L10,0 L10,10 Z")

    def test_close_returns_to_latest_subpath(self) -> None:
        """Test Z targets the latest move-to, not the first vertex."""
        points = run("M0,0 L5,0 M20,20 L30,20 L30,30 Z")
        assert points[-1] == Point2D(20, 20)

    def test_close_moves_current_point(self) -> None:
        """Test commands after Z continue from the subpath start."""
        points = run("M10,10 L20,10 L20,20 Z l5,0")
        assert points[-1] == Point2D(15, 10)

    def test_close_without_move_uses_first_vertex(self) -> None:
        """Test Z falls back to the first vertex when no move-to happened."""
        points = run("L10,0 L10,10 Z")
        assert points == [Point2D(10, 0), Point2D(10, 10), Point2D(10, 0)]

    def test_close_on_empty_path(self, sink) -> None:
        """Test Z with no vertices is a no-op."""
        assert run("Z", sink) == []

    def test_close_after_curve_start(self) -> None:
        """Test a subpath starting with a move-to closes after curves."""
        points = run("M0,0 C0,10 10,10 10,0 Z", segments=4)
        assert points[-1] == Point2D(0, 0)

    def test_close_arguments_ignored(self, sink) -> None:
        """Test arguments given to Z are reported and ignored."""
        points = run("M0,0 L10,0 L10,10 Z 5 5", sink)
        assert points[-1] == Point2D(0, 0)
        assert len(sink.of_kind(AnomalyKind.MALFORMED_INPUT)) == 1


class TestCurves:
    """Tests for Bezier and arc commands."""

    def test_cubic_sample_count(self) -> None:
        """Test each cubic segment emits segments + 1 vertices."""
        points = run("M0,0 C0,10 10,10 10,0")
        assert len(points) == 1 + CURVE_SEGMENTS + 1
        assert points[1] == Point2D(0, 0)
        assert points[-1].x == pytest.approx(10.0)
        assert points[-1].y == pytest.approx(0.0)

    def test_relative_cubic(self) -> None:
        """Test relative control and end points resolve against the start."""
        absolute = run("M10,10 C10,20 20,20 20,10", segments=8)
        relative = run("M10,10 c0,10 10,10 10,0", segments=8)
        assert approx_points(relative) == tuples(absolute)

    def test_smooth_cubic_after_line_is_cusp(self) -> None:
        """Test S without a previous cubic uses the current point as cp1."""
        smooth = run("M0,0 L10,0 S20,10 30,0", segments=8)
        explicit = run("M0,0 L10,0 C10,0 20,10 30,0", segments=8)
        assert smooth == explicit

    def test_smooth_cubic_reflects_cp2(self) -> None:
        """Test S mirrors the previous cp2 through the current point."""
        smooth = run("M0,0 C0,10 10,10 10,0 S20,-10 20,0", segments=8)
        explicit = run("M0,0 C0,10 10,10 10,0 C10,-10 20,-10 20,0", segments=8)
        assert approx_points(smooth) == tuples(explicit)

    def test_smooth_cubic_after_quadratic_is_cusp(self) -> None:
        """Test S ignores a quadratic control point."""
        smooth = run("M0,0 Q5,10 10,0 S20,10 30,0", segments=8)
        explicit = run("M0,0 Q5,10 10,0 C10,0 20,10 30,0", segments=8)
        assert smooth == explicit

    def test_smooth_quadratic_reflects(self) -> None:
        """Test T mirrors the previous quadratic control point."""
        smooth = run("M0,0 Q5,10 10,0 T20,0", segments=8)
        explicit = run("M0,0 Q5,10 10,0 Q15,-10 20,0", segments=8)
        assert approx_points(smooth) == tuples(explicit)

    def test_smooth_quadratic_after_line_is_straight(self) -> None:
        """Test T without a previous quadratic uses the current point."""
        smooth = run("M0,0 L10,0 T20,0", segments=4)
        explicit = run("M0,0 L10,0 Q10,0 20,0", segments=4)
        assert smooth == explicit

    def test_quadratic_final_vertex_tagged(self) -> None:
        """Test the last quadratic sample stores its control point."""
        interpreter = PathInterpreter(curve_segments=4)
        vertices = interpreter.interpret(parse_path_data("M0,0 Q5,10 10,0"))
        assert vertices[-1].control_point1 == Point2D(5, 10)
        assert vertices[-1].control_point2 is None

    def test_arc_cursor_moves_to_end_point(self) -> None:
        """Test the current point becomes the arc end point."""
        interpreter = PathInterpreter(curve_segments=4)
        vertices = interpreter.interpret(parse_path_data("M0,0 A5,5 0 0 1 20,0"))
        expected = flatten_arc(Point2D(0, 0), Point2D(20, 0), 5, 5, 0, False, True, 4)
        assert [v.point for v in vertices[1:]] == [s.point for s in expected]
        assert interpreter.current_point == Point2D(20, 0)

    def test_relative_arc_end(self) -> None:
        """Test a relative arc end point resolves against the current point."""
        interpreter = PathInterpreter(curve_segments=4)
        interpreter.interpret(parse_path_data("M10,10 a5,5 0 0 0 10,0"))
        assert interpreter.current_point == Point2D(20, 10)


class TestMalformedArguments:
    """Tests for recovery from bad or missing arguments."""

    def test_malformed_token_leaves_move_only(self, sink) -> None:
        """Test an incomplete line-to after a bad token is a no-op."""
        points = run("M0,0 L10,abc", sink)
        assert points == [Point2D(0, 0)]
        assert sink.of_kind(AnomalyKind.MALFORMED_INPUT)
        assert sink.of_kind(AnomalyKind.INSUFFICIENT_ARGUMENTS)

    def test_incomplete_trailing_group_dropped(self, sink) -> None:
        """Test complete groups apply and the trailing partial group is dropped."""
        points = run("M0,0 L1,1 2", sink)
        assert points == [Point2D(0, 0), Point2D(1, 1)]
        events = sink.of_kind(AnomalyKind.INSUFFICIENT_ARGUMENTS)
        assert len(events) == 1
        assert events[0].context["leftover"] == 1

    def test_cubic_with_too_few_arguments(self, sink) -> None:
        """Test a short cubic appends nothing."""
        points = run("M0,0 C1,1 2,2", sink)
        assert points == [Point2D(0, 0)]
        assert len(sink.of_kind(AnomalyKind.INSUFFICIENT_ARGUMENTS)) == 1

    def test_unknown_command_object(self, sink) -> None:
        """Test executing an unknown command directly is reported."""
        interpreter = PathInterpreter(sink=sink)
        interpreter.execute(PathCommand("X", (1.0, 2.0)))
        assert interpreter.vertices == []
        assert len(sink.of_kind(AnomalyKind.MALFORMED_INPUT)) == 1

    def test_sink_does_not_change_result(self, sink) -> None:
        """Test vertices are the same with or without a collecting sink."""
        path_data = "M0,0 L10,abc L5 5 6 C1"
        assert run(path_data, sink) == run(path_data, CollectingDiagnosticsSink())


class TestState:
    """Tests for interpreter state handling."""

    def test_interpret_resets_state(self) -> None:
        """Test a second run starts from the origin with no vertices."""
        interpreter = PathInterpreter()
        interpreter.interpret(parse_path_data("M50,50 L60,60"))
        vertices = interpreter.interpret(parse_path_data("l1,1"))
        assert [v.point for v in vertices] == [Point2D(1, 1)]
        assert interpreter.subpath_start is None

    def test_subpath_start_tracks_latest_move(self) -> None:
        """Test the subpath start index follows every move-to."""
        interpreter = PathInterpreter()
        interpreter.interpret(parse_path_data("M0,0 L1,1 L2,2 M5,5"))
        assert interpreter.subpath_start == 3

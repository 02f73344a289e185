"""Path command interpreter.

Walks parsed path commands, resolves relative coordinates against the
current point and appends flattened vertices. The start of the current
subpath is tracked explicitly as the index of the vertex produced by the
latest move-to, which is where a close-path command returns to.

Every command letter accepts implicit repetition: the argument list is
consumed in groups of the command's arity and each complete group is applied
in turn. An incomplete trailing group is dropped with a diagnostic; earlier
groups of the same command still take effect.
"""

from collections.abc import Callable, Iterable

from svgtess.core.flatten import (
    CURVE_SEGMENTS,
    flatten_arc,
    flatten_cubic,
    flatten_quadratic,
    reflect_control_point,
)
from svgtess.core.path_parser import PathCommand
from svgtess.domain import CurvePoint, Point2D
from svgtess.utils.diagnostics import AnomalyKind, DiagnosticsSink, anomaly, default_sink

ORIGIN = Point2D(0.0, 0.0)

# Number of numeric arguments consumed per repetition of each command.
COMMAND_ARITY: dict[str, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}


class PathInterpreter:
    """Stateful interpreter turning path commands into flattened vertices.

    Example:
        interpreter = PathInterpreter()
        vertices = interpreter.interpret(parse_path_data("M0,0 L10,0 L10,10 Z"))
        # (0,0) (10,0) (10,10) (0,0)
    """

    def __init__(
        self,
        curve_segments: int = CURVE_SEGMENTS,
        sink: DiagnosticsSink | None = None,
    ) -> None:
        """Initialize the interpreter.

        Args:
            curve_segments: Parameter steps per curve or arc segment
            sink: Receiver for recoverable anomalies
        """
        self.curve_segments = curve_segments
        self._sink = default_sink(sink)
        self.vertices: list[CurvePoint] = []
        self.current_point = ORIGIN
        self.subpath_start: int | None = None
        self._relative = False
        self._handlers: dict[str, Callable[[tuple[float, ...]], None]] = {
            "M": self._move_to,
            "L": self._line_to,
            "H": self._horizontal_line_to,
            "V": self._vertical_line_to,
            "C": self._cubic_to,
            "S": self._smooth_cubic_to,
            "Q": self._quadratic_to,
            "T": self._smooth_quadratic_to,
            "A": self._arc_to,
        }

    def reset(self) -> None:
        """Clear vertices and move the cursor back to the origin."""
        self.vertices = []
        self.current_point = ORIGIN
        self.subpath_start = None
        self._relative = False

    def interpret(self, commands: Iterable[PathCommand]) -> list[CurvePoint]:
        """Run a full command sequence from a clean state.

        Args:
            commands: Parsed path commands

        Returns:
            The vertex list built from the commands
        """
        self.reset()
        for command in commands:
            self.execute(command)
        return self.vertices

    def execute(self, command: PathCommand) -> None:
        """Apply a single command to the current state."""
        name = command.name
        self._relative = command.is_relative

        if name == "Z":
            if command.args:
                self._report(
                    AnomalyKind.MALFORMED_INPUT,
                    "Ignored arguments of close-path",
                    command=command.letter,
                    count=len(command.args),
                )
            self._close_path()
            return

        handler = self._handlers.get(name)
        if handler is None:
            self._report(AnomalyKind.MALFORMED_INPUT, "Unknown path command", command=command.letter)
            return

        for index, group in enumerate(self._argument_groups(command)):
            # Pairs after the first one of a move-to are implicit line-tos.
            if name == "M" and index > 0:
                self._line_to(group)
            else:
                handler(group)

    def _argument_groups(self, command: PathCommand) -> list[tuple[float, ...]]:
        arity = COMMAND_ARITY[command.name]
        args = command.args
        complete = len(args) - len(args) % arity

        if complete == 0:
            self._report(
                AnomalyKind.INSUFFICIENT_ARGUMENTS,
                "Path command has too few arguments",
                command=command.letter,
                expected=arity,
                got=len(args),
            )
            return []

        if complete < len(args):
            self._report(
                AnomalyKind.INSUFFICIENT_ARGUMENTS,
                "Dropped incomplete argument group",
                command=command.letter,
                expected=arity,
                leftover=len(args) - complete,
            )

        return [args[i : i + arity] for i in range(0, complete, arity)]

    def _report(self, kind: AnomalyKind, message: str, **context: object) -> None:
        self._sink.report(anomaly(kind, message, **context))

    def _absolute(self, x: float, y: float) -> Point2D:
        if self._relative:
            return Point2D(self.current_point.x + x, self.current_point.y + y)
        return Point2D(x, y)

    def _append(self, vertices: Iterable[CurvePoint], end: Point2D) -> None:
        self.vertices.extend(vertices)
        self.current_point = end

    def _move_to(self, args: tuple[float, ...]) -> None:
        point = self._absolute(args[0], args[1])
        self.subpath_start = len(self.vertices)
        self._append([CurvePoint(point)], point)

    def _line_to(self, args: tuple[float, ...]) -> None:
        point = self._absolute(args[0], args[1])
        self._append([CurvePoint(point)], point)

    def _horizontal_line_to(self, args: tuple[float, ...]) -> None:
        x = self.current_point.x + args[0] if self._relative else args[0]
        point = Point2D(x, self.current_point.y)
        self._append([CurvePoint(point)], point)

    def _vertical_line_to(self, args: tuple[float, ...]) -> None:
        y = self.current_point.y + args[0] if self._relative else args[0]
        point = Point2D(self.current_point.x, y)
        self._append([CurvePoint(point)], point)

    def _cubic_to(self, args: tuple[float, ...]) -> None:
        cp1 = self._absolute(args[0], args[1])
        cp2 = self._absolute(args[2], args[3])
        end = self._absolute(args[4], args[5])
        self._append(flatten_cubic(self.current_point, cp1, cp2, end, self.curve_segments), end)

    def _smooth_cubic_to(self, args: tuple[float, ...]) -> None:
        cp1 = self.current_point
        previous = self.vertices[-1] if self.vertices else None
        if previous is not None and previous.control_point2 is not None:
            cp1 = reflect_control_point(previous.control_point2, self.current_point)

        cp2 = self._absolute(args[0], args[1])
        end = self._absolute(args[2], args[3])
        self._append(flatten_cubic(self.current_point, cp1, cp2, end, self.curve_segments), end)

    def _quadratic_to(self, args: tuple[float, ...]) -> None:
        cp = self._absolute(args[0], args[1])
        end = self._absolute(args[2], args[3])
        self._append(flatten_quadratic(self.current_point, cp, end, self.curve_segments), end)

    def _smooth_quadratic_to(self, args: tuple[float, ...]) -> None:
        cp = self.current_point
        previous = self.vertices[-1] if self.vertices else None
        if previous is not None and previous.control_point1 is not None:
            cp = reflect_control_point(previous.control_point1, self.current_point)

        end = self._absolute(args[0], args[1])
        self._append(flatten_quadratic(self.current_point, cp, end, self.curve_segments), end)

    def _arc_to(self, args: tuple[float, ...]) -> None:
        rx, ry, rotation, large_arc, sweep = args[:5]
        end = self._absolute(args[5], args[6])
        samples = flatten_arc(
            self.current_point,
            end,
            rx,
            ry,
            rotation,
            large_arc != 0,
            sweep != 0,
            self.curve_segments,
        )
        # The approximation does not end on the end point; the cursor does.
        self._append(samples, end)

    def _close_path(self) -> None:
        if not self.vertices:
            return

        start_index = self.subpath_start if self.subpath_start is not None else 0
        target = self.vertices[start_index].point

        if self.current_point == target:
            return

        self._append([CurvePoint(target)], target)

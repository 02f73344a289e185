"""Path data tokenizer.

Turns the ``d`` attribute of a path element into an ordered list of
(command letter, numeric arguments) pairs. Nothing here knows about the
current point or coordinate resolution; that is the interpreter's job.

Malformed input never aborts parsing. Unknown command letters are dropped
together with their argument text and unparseable numeric tokens are dropped
one by one, each with a diagnostic event.
"""

import re
from dataclasses import dataclass

from svgtess.utils.diagnostics import AnomalyKind, DiagnosticsSink, anomaly, default_sink

PATH_COMMANDS = frozenset("MLHVCSQTAZ")

# A segment starts at any letter except e/E, which belong to number exponents.
_SEGMENT_RE = re.compile(r"([A-DF-Za-df-z])([^A-DF-Za-df-z]*)")
_SEPARATOR_RE = re.compile(r"[\s,]+")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class PathCommand:
    """A single path command with its raw numeric arguments.

    Attributes:
        letter: Command letter as written (case encodes absolute/relative)
        args: Numeric arguments in order of appearance
    """

    letter: str
    args: tuple[float, ...] = ()

    @property
    def name(self) -> str:
        """Upper-case command name, e.g. ``C`` for both ``C`` and ``c``."""
        return self.letter.upper()

    @property
    def is_relative(self) -> bool:
        """True for lower-case (relative) commands."""
        return self.letter.islower()


def parse_arguments(text: str, sink: DiagnosticsSink | None = None) -> list[float]:
    """Parse the argument text that follows a command letter.

    Commas and whitespace both separate tokens. Each token must be a complete
    decimal number in the locale-invariant form (``.`` as decimal point,
    optional exponent).

    Args:
        text: Raw argument text
        sink: Receiver for dropped-token diagnostics

    Returns:
        Parsed numbers, in order, without the dropped tokens
    """
    numbers: list[float] = []
    for token in _SEPARATOR_RE.split(text.strip()):
        if not token:
            continue
        if _NUMBER_RE.fullmatch(token):
            numbers.append(float(token))
        else:
            default_sink(sink).report(
                anomaly(
                    AnomalyKind.MALFORMED_INPUT,
                    "Dropped unparseable path argument",
                    token=token,
                )
            )
    return numbers


def parse_path_data(path_data: str | None, sink: DiagnosticsSink | None = None) -> list[PathCommand]:
    """Tokenize path data into commands.

    Args:
        path_data: Content of a path ``d`` attribute
        sink: Receiver for recoverable anomalies

    Returns:
        Commands in order of appearance; empty for empty or missing data

    Examples:
        >>> [c.letter for c in parse_path_data("M0,0 L10,0 z")]
        ['M', 'L', 'z']
    """
    sink = default_sink(sink)

    if not path_data or not path_data.strip():
        sink.report(anomaly(AnomalyKind.EMPTY_OR_MISSING_DATA, "Empty path data"))
        return []

    first = _SEGMENT_RE.search(path_data)
    leading = path_data[: first.start()] if first else path_data
    if leading.strip():
        sink.report(
            anomaly(
                AnomalyKind.MALFORMED_INPUT,
                "Dropped path data before first command",
                text=leading.strip()[:40],
            )
        )

    commands: list[PathCommand] = []
    for match in _SEGMENT_RE.finditer(path_data):
        letter, arg_text = match.group(1), match.group(2)

        if letter.upper() not in PATH_COMMANDS:
            sink.report(
                anomaly(
                    AnomalyKind.MALFORMED_INPUT,
                    "Dropped unknown path command",
                    command=letter,
                )
            )
            continue

        commands.append(PathCommand(letter=letter, args=tuple(parse_arguments(arg_text, sink))))

    return commands

"""Diagnostics sinks for recoverable anomalies.

Parsing malformed path data, styles or attributes never raises. Each anomaly
is turned into a DiagnosticEvent and handed to a sink. Sinks only observe;
nothing they do feeds back into the geometry being built.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

import structlog


class AnomalyKind(str, Enum):
    """Classes of recoverable anomalies."""

    MALFORMED_INPUT = "malformed_input"
    INSUFFICIENT_ARGUMENTS = "insufficient_arguments"
    EMPTY_OR_MISSING_DATA = "empty_or_missing_data"


@dataclass(frozen=True)
class DiagnosticEvent:
    """A single recoverable anomaly.

    Attributes:
        kind: Anomaly class
        message: Short human-readable description
        context: Structured details (command letter, token, attribute, ...)
    """

    kind: AnomalyKind
    message: str
    context: dict[str, Any] = field(default_factory=dict)


class DiagnosticsSink(Protocol):
    """Receiver of diagnostic events."""

    def report(self, event: DiagnosticEvent) -> None: ...


def anomaly(kind: AnomalyKind, message: str, **context: Any) -> DiagnosticEvent:
    """Build a DiagnosticEvent from keyword context."""
    return DiagnosticEvent(kind=kind, message=message, context=context)


class LoggingDiagnosticsSink:
    """Forwards events to a structlog logger at warning level."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("svgtess")
        self.count = 0

    def report(self, event: DiagnosticEvent) -> None:
        self.count += 1
        self._logger.warning(event.message, kind=event.kind.value, **event.context)


class CollectingDiagnosticsSink:
    """Keeps every reported event in memory."""

    def __init__(self) -> None:
        self.events: list[DiagnosticEvent] = []

    def report(self, event: DiagnosticEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: AnomalyKind) -> list[DiagnosticEvent]:
        """Return the collected events of one kind."""
        return [event for event in self.events if event.kind == kind]

    def clear(self) -> None:
        """Drop the collected events."""
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)


class FanoutDiagnosticsSink:
    """Forwards each event to several sinks in order."""

    def __init__(self, *sinks: DiagnosticsSink) -> None:
        self._sinks = sinks

    def report(self, event: DiagnosticEvent) -> None:
        for sink in self._sinks:
            sink.report(event)


def default_sink(sink: DiagnosticsSink | None) -> DiagnosticsSink:
    """Return ``sink`` or a logging sink when none was given."""
    return sink if sink is not None else LoggingDiagnosticsSink()

"""Utility functions for svgtess.

This module provides utility functions including:

- Logging setup and configuration
- Build statistics
- Diagnostics sinks for recoverable anomalies
"""

from svgtess.utils.diagnostics import (
    AnomalyKind,
    CollectingDiagnosticsSink,
    DiagnosticEvent,
    DiagnosticsSink,
    FanoutDiagnosticsSink,
    LoggingDiagnosticsSink,
    anomaly,
    default_sink,
)
from svgtess.utils.logging import (
    BuildLogger,
    BuildStats,
    configure_logging,
)

__all__ = [
    "AnomalyKind",
    "BuildLogger",
    "BuildStats",
    "CollectingDiagnosticsSink",
    "DiagnosticEvent",
    "DiagnosticsSink",
    "FanoutDiagnosticsSink",
    "LoggingDiagnosticsSink",
    "anomaly",
    "configure_logging",
    "default_sink",
]

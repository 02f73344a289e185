"""Logging utilities for svgtess."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class BuildStats:
    """Statistics from a document build."""

    shape_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    filled_count: int = 0
    stroked_count: int = 0
    triangle_count: int = 0
    segment_count: int = 0
    anomaly_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate build duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("svgtess")
    logger.info("Logging initialized", log_file=str(log_file) if log_file else None, level=file_level)

    return logger


class BuildLogger:
    """Logger for tracking shape building progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = BuildStats()

    def log_shape_built(
        self,
        label: str,
        vertex_count: int,
        filled: bool,
        stroked: bool,
    ) -> None:
        """Log a shape that was built from a document element."""
        self._logger.debug(
            "Shape built",
            shape=label,
            vertices=vertex_count,
            filled=filled,
            stroked=stroked,
        )
        self._stats.shape_count += 1
        if filled:
            self._stats.filled_count += 1
        if stroked:
            self._stats.stroked_count += 1

    def log_shape_skipped(self, label: str, reason: str) -> None:
        """Log skipped element."""
        self._logger.debug("Shape skipped", shape=label, reason=reason)
        self._stats.skipped_count += 1

    def log_shape_error(
        self,
        label: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log an unexpected error while building a shape."""
        self._logger.error(
            "Shape building failed",
            shape=label,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((label, str(error)))

    def log_normalization(self, offset_x: float, offset_y: float, shape_count: int) -> None:
        """Log the offset applied by the global normalizer."""
        self._logger.debug(
            "Scene normalized",
            dx=round(offset_x, 4),
            dy=round(offset_y, 4),
            shapes=shape_count,
        )

    def reset(self) -> None:
        """Start a fresh set of statistics."""
        self._stats = BuildStats()

    @property
    def stats(self) -> BuildStats:
        """Get current build statistics."""
        return self._stats

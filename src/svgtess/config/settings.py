"""Configuration settings for svgtess."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class WindingRule(str, Enum):
    """Polygon fill rule handed to the tessellator."""

    EVEN_ODD = "even_odd"
    NONZERO = "nonzero"


class FlatteningConfig(BaseModel):
    """Configuration for curve flattening.

    Curves are sampled at a fixed number of parameter steps rather than by a
    flatness tolerance, so every segment of a given kind yields the same
    number of vertices.
    """

    curve_segments: int = Field(
        default=32,
        ge=1,
        le=1024,
        description="Parameter steps per Bezier or arc segment",
    )
    ellipse_segments: int = Field(
        default=32,
        ge=3,
        le=1024,
        description="Segments used to approximate circle and ellipse elements",
    )


class TessellationConfig(BaseModel):
    """Configuration for fill tessellation."""

    winding_rule: WindingRule = Field(
        default=WindingRule.EVEN_ODD,
        description="Fill rule used to decide which regions are inside",
    )
    closure_tolerance: float = Field(
        default=0.001,
        gt=0.0,
        le=1.0,
        description="Per-axis distance under which a contour counts as closed",
    )


class NormalizationConfig(BaseModel):
    """Configuration for global coordinate normalization."""

    enabled: bool = Field(
        default=True,
        description="Translate the scene so its minimum corner sits at the origin",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SvgTessSettings(BaseModel):
    """Main application settings."""

    flattening: FlatteningConfig = Field(default_factory=FlatteningConfig)
    tessellation: TessellationConfig = Field(default_factory=TessellationConfig)
    normalization: NormalizationConfig = Field(default_factory=NormalizationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SvgTessSettings:
    """Get default application settings."""
    return SvgTessSettings()

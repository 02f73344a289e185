"""Configuration management for svgtess.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FlatteningConfig: Curve sampling settings
- TessellationConfig: Fill rule and contour closure settings
- NormalizationConfig: Global normalization switch
- LoggingConfig: Logging settings
- SvgTessSettings: Main application settings
"""

from svgtess.config.settings import (
    FlatteningConfig,
    LoggingConfig,
    NormalizationConfig,
    SvgTessSettings,
    TessellationConfig,
    WindingRule,
    get_default_settings,
)

__all__ = [
    "FlatteningConfig",
    "LoggingConfig",
    "NormalizationConfig",
    "SvgTessSettings",
    "TessellationConfig",
    "WindingRule",
    "get_default_settings",
]

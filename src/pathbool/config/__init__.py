"""Configuration management for pathbool.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, library callers or defaults.

Key classes:
- IntersectionConfig: Subdivision search and deduplication settings
- ClassificationConfig: Fill rule and point-in-path settings
- StitchConfig: Contour reconstruction settings
- LoggingConfig: Logging settings
- PathboolSettings: Main application settings
"""

from pathbool.config.settings import (
    ClassificationConfig,
    FillRule,
    IntersectionConfig,
    LoggingConfig,
    PathboolSettings,
    StitchConfig,
    get_default_settings,
)

__all__ = [
    "ClassificationConfig",
    "FillRule",
    "IntersectionConfig",
    "LoggingConfig",
    "PathboolSettings",
    "StitchConfig",
    "get_default_settings",
]

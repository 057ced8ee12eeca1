"""Configuration management for pathorder.

This module provides configuration management using Pydantic models.
Configuration can be provided via layer files, CLI arguments or defaults.

Key classes:
- ZSeamConfig: Seam placement policy for contours
- LineOrderConfig: Scoring parameters for line ordering
- GridConfig: Spatial index settings
- LoggingConfig: Logging settings
- PathOrderSettings: Main application settings
"""

from pathorder.config.settings import (
    CornerPreference,
    GridConfig,
    LineOrderConfig,
    LoggingConfig,
    PathOrderSettings,
    SeamType,
    ZSeamConfig,
    get_default_settings,
)

__all__ = [
    "CornerPreference",
    "GridConfig",
    "LineOrderConfig",
    "LoggingConfig",
    "PathOrderSettings",
    "SeamType",
    "ZSeamConfig",
    "get_default_settings",
]

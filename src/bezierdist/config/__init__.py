"""Configuration management for bezierdist.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RootFinderConfig: Subdivision depth and flatness settings
- LengthConfig: Arc length sampling settings
- LoggingConfig: Logging settings
- LogLevel: Accepted logging level names
- BezierDistSettings: Main application settings
"""

from bezierdist.config.settings import (
    FLATNESS_EXPONENT,
    LENGTH_STEP,
    MAX_RECURSION,
    BezierDistSettings,
    LengthConfig,
    LoggingConfig,
    LogLevel,
    RootFinderConfig,
    get_default_settings,
)

__all__ = [
    "FLATNESS_EXPONENT",
    "LENGTH_STEP",
    "MAX_RECURSION",
    "BezierDistSettings",
    "LengthConfig",
    "LoggingConfig",
    "LogLevel",
    "RootFinderConfig",
    "get_default_settings",
]

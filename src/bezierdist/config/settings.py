"""Configuration settings for bezierdist."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

MAX_RECURSION = 64
FLATNESS_EXPONENT = 64
LENGTH_STEP = 0.005


class LogLevel(str, Enum):
    """Standard library logging level names."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class RootFinderConfig(BaseModel):
    """Configuration for the recursive subdivision root finder.

    The flatness tolerance is expressed as a power of two so that the default
    ties the accepted intercept band to the maximum subdivision depth.
    """

    max_recursion: int = Field(
        default=MAX_RECURSION,
        ge=1,
        le=512,
        description="Subdivision depth at which a single crossing is accepted as a root",
    )
    flatness_exponent: int = Field(
        default=FLATNESS_EXPONENT,
        ge=1,
        le=1074,
        description="Polygons are flat when their intercept band is below 2**-exponent",
    )

    @property
    def flatness_tolerance(self) -> float:
        """Intercept band width below which a polygon counts as flat."""
        return 2.0**-self.flatness_exponent


class LengthConfig(BaseModel):
    """Configuration for arc length sampling."""

    step: float = Field(
        default=LENGTH_STEP,
        gt=0.0,
        le=1.0,
        description="Parameter increment between arc length samples",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class BezierDistSettings(BaseModel):
    """Main application settings."""

    root_finder: RootFinderConfig = Field(default_factory=RootFinderConfig)
    length: LengthConfig = Field(default_factory=LengthConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BezierDistSettings:
    """Get default application settings."""
    return BezierDistSettings()

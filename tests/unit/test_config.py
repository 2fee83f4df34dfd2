"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from bezierdist.config import (
    LENGTH_STEP,
    MAX_RECURSION,
    BezierDistSettings,
    LengthConfig,
    LoggingConfig,
    LogLevel,
    RootFinderConfig,
    get_default_settings,
)


class TestRootFinderConfig:
    """Tests for RootFinderConfig."""

    def test_defaults(self):
        config = RootFinderConfig()
        assert config.max_recursion == MAX_RECURSION == 64
        assert config.flatness_tolerance == 2.0**-64

    def test_flatness_tolerance_follows_exponent(self):
        assert RootFinderConfig(flatness_exponent=10).flatness_tolerance == 2.0**-10

    @pytest.mark.parametrize("value", [0, -1, 513, 10_000])
    def test_max_recursion_bounds(self, value):
        with pytest.raises(ValidationError):
            RootFinderConfig(max_recursion=value)

    def test_max_recursion_upper_bound_accepted(self):
        assert RootFinderConfig(max_recursion=512).max_recursion == 512


class TestLengthConfig:
    """Tests for LengthConfig."""

    def test_default_step(self):
        assert LengthConfig().step == LENGTH_STEP == 0.005

    @pytest.mark.parametrize("value", [0.0, -0.1, 1.5])
    def test_step_bounds(self, value):
        with pytest.raises(ValidationError):
            LengthConfig(step=value)


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_default_levels(self):
        config = LoggingConfig()
        assert config.log_level is LogLevel.WARNING
        assert config.file_log_level is LogLevel.DEBUG

    def test_level_from_name(self):
        assert LoggingConfig(log_level="ERROR").log_level is LogLevel.ERROR

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            LoggingConfig(log_level="VERBOSE")


class TestSettings:
    """Tests for the aggregated settings."""

    def test_default_settings(self):
        settings = get_default_settings()
        assert isinstance(settings, BezierDistSettings)
        assert settings.root_finder == RootFinderConfig()
        assert settings.length == LengthConfig()
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"

    def test_nested_override(self):
        settings = BezierDistSettings(root_finder=RootFinderConfig(max_recursion=8))
        assert settings.root_finder.max_recursion == 8
        assert settings.length.step == LENGTH_STEP

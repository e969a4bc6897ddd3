"""Tests for settings models."""

import pytest
from pydantic import ValidationError

from fontmelt.config import (
    LoggingConfig,
    MeltSettings,
    ProcessingConfig,
    ShapeStyle,
    get_default_settings,
)


class TestSettings:
    """Tests for MeltSettings and its sections."""

    def test_defaults(self) -> None:
        """Test the default settings."""
        settings = get_default_settings()

        assert settings == MeltSettings()
        assert settings.shape.scaling == 1.0
        assert settings.processing.max_workers == 1
        assert settings.logging.log_level == "WARNING"
        assert settings.logging.log_file is None

    @pytest.mark.parametrize("scaling", [0.0, -1.0, float("inf"), float("nan")])
    def test_scaling_must_be_positive_and_finite(self, scaling: float) -> None:
        with pytest.raises(ValidationError):
            ShapeStyle(scaling=scaling)

    def test_workers_at_least_one(self) -> None:
        with pytest.raises(ValidationError):
            ProcessingConfig(max_workers=0)

    def test_style_is_frozen(self) -> None:
        """Test a shape style cannot be modified after creation."""
        style = ShapeStyle(scaling=2.0)
        with pytest.raises(ValidationError):
            style.scaling = 3.0  # type: ignore[misc]

    def test_log_file_path(self, tmp_path) -> None:
        config = LoggingConfig(log_file=str(tmp_path / "run.log"))
        assert config.log_file == tmp_path / "run.log"

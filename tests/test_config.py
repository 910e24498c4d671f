"""Tests for configuration management."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from termfolio.config import Settings


def make_settings(**overrides) -> Settings:
    """Create a Settings instance that ignores the environment's .env file."""
    return Settings(_env_file=None, **overrides)  # type: ignore[call-arg]


class TestSettings:
    """Test Settings class."""

    def test_default_values(self) -> None:
        """Test that settings have expected defaults."""
        settings = make_settings()
        assert settings.wrap_width == 80
        assert settings.refresh_per_second == 4
        assert settings.log_level == "WARNING"
        assert settings.log_file is None
        assert settings.default_source.endswith("_config.yml")

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test TERMFOLIO_* environment variables override defaults."""
        monkeypatch.setenv("TERMFOLIO_WRAP_WIDTH", "120")
        monkeypatch.setenv("TERMFOLIO_LOG_FILE", "/tmp/termfolio.log")
        settings = make_settings()
        assert settings.wrap_width == 120
        assert settings.log_file == Path("/tmp/termfolio.log")

    def test_invalid_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_settings(log_level="LOUD")

    @pytest.mark.parametrize(
        ("terminal_width", "margin", "expected"),
        [(100, 4, 96), (80, 0, 80), (3, 4, 1), (0, 4, 1)],
        ids=["normal", "no-margin", "narrower-than-margin", "zero"],
    )
    def test_content_width(self, terminal_width: int, margin: int, expected: int) -> None:
        """Test content width subtracts the margin and never drops below 1."""
        settings = make_settings(render_margin=margin)
        assert settings.content_width(terminal_width) == expected

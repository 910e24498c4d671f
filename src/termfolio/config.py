"""Configuration management using pydantic-settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables (TERMFOLIO_*)."""

    model_config = SettingsConfigDict(
        env_prefix="TERMFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Document used when no source is given on the command line
    default_source: str = (
        "https://github.com/Pokeylooted/Pokeylooted.github.io/blob/main/_config.yml"
    )

    # Text layout
    wrap_width: int = 80  # Used when the terminal width is unknown
    render_margin: int = 4  # Border + padding columns around the content area

    # Fetching
    request_timeout: float = 30.0

    # Terminal loop
    refresh_per_second: int = 4  # 250ms tick
    logo: str = "duck"

    # Logging
    log_level: LogLevel = "WARNING"
    log_file: Path | None = None

    def content_width(self, terminal_width: int) -> int:
        """Get the wrap width for a terminal of the given column count.

        Args:
            terminal_width: Total columns available to the renderer

        Returns:
            Width to wrap text at, never below 1
        """
        return max(1, terminal_width - self.render_margin)


# Global settings instance
settings = Settings()

"""CLI Configuration management."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.openbanking.org.uk/open-banking/v3.1/aisp"


class CLIConfig(BaseSettings):
    """Configuration for the Open Banking CLI.

    Every field can be overridden with an ``OPENBANKING_``-prefixed
    environment variable or a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENBANKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API settings
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0

    # Where the settings store lives
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".openbanking-cli")

    # UI settings
    theme: str = "default"
    debug: bool = False

    @property
    def settings_path(self) -> Path:
        return self.config_dir / "config.json"


# Global config instance
_config: Optional[CLIConfig] = None


def get_config() -> CLIConfig:
    """Get or create the global CLI configuration."""
    global _config
    if _config is None:
        _config = CLIConfig()
    return _config


def set_config(config: CLIConfig) -> None:
    """Set the global CLI configuration."""
    global _config
    _config = config

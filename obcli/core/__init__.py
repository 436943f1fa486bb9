"""Core CLI components - configuration, settings store, API client, and errors."""

from obcli.core.api_client import APIClient
from obcli.core.config import CLIConfig, get_config
from obcli.core.settings import SettingsStore

__all__ = ["CLIConfig", "get_config", "APIClient", "SettingsStore"]

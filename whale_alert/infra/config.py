"""
Configuration
-------------
Transport settings for the API client, loaded from YAML with environment
variable overrides.

Rules:
- The API key is never part of file or environment configuration
- Environment variables (WHALE_ALERT_*) override file values
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging
import os

import yaml


BASE_URL = "https://api.whale-alert.io/v1"
ENV_PREFIX = "WHALE_ALERT_"
DEFAULT_USER_AGENT = "whale-alert-client/1.0"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


class ConfigManager:
    """
    Centralized configuration management.
    Loads configuration from YAML with environment variable overrides.
    """

    def __init__(self, config_path: Union[str, Path] = "whale_alert.yaml"):
        self._config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._logger = logging.getLogger("whale_alert.infra.config")

        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file."""
        if not self._config_path.exists():
            self._logger.debug(f"Config file not found: {self._config_path}")
            self._config = {}
            return

        with open(self._config_path, "r", encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {self._config_path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Top level of {self._config_path} must be a mapping")

        self._config = loaded
        self._logger.info(f"Loaded config from {self._config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.
        Supports dot notation: 'section.key'
        Environment variables override file config.
        """
        env_key = f"{ENV_PREFIX}{key.upper().replace('.', '_')}"
        env_value = os.getenv(env_key)
        if env_value is not None:
            return env_value

        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get an entire configuration section."""
        value = self._config.get(section, {})
        return value if isinstance(value, dict) else {}

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()


@dataclass
class ClientConfig:
    """Transport configuration for APIClient."""
    base_url: str = BASE_URL
    timeout_seconds: Optional[float] = None  # None keeps the HTTP layer's default
    user_agent: str = DEFAULT_USER_AGENT
    headers: Dict[str, str] = field(default_factory=dict)


def _as_float(value: Any, key: str) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key} must be a number, got {value!r}") from e


def load_client_config(config_path: Union[str, Path] = "whale_alert.yaml") -> ClientConfig:
    """
    Build a ClientConfig from the `client` section of a YAML file.

    Recognized keys: base_url, timeout_seconds, user_agent, headers.
    """
    manager = ConfigManager(config_path)
    defaults = ClientConfig()

    headers = manager.get("client.headers", {})
    if not isinstance(headers, dict):
        raise ConfigError("client.headers must be a mapping")

    return ClientConfig(
        base_url=str(manager.get("client.base_url", defaults.base_url)),
        timeout_seconds=_as_float(manager.get("client.timeout_seconds"), "client.timeout_seconds"),
        user_agent=str(manager.get("client.user_agent", defaults.user_agent)),
        headers={str(k): str(v) for k, v in headers.items()},
    )

"""
Configuration module for the weather profiles viewer.

Loads configuration from JSON file and environment variables.
"""

import copy
import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants
from .date_utils import DateUtils


DEFAULT_CONFIG: Dict[str, Any] = {
    "api": {
        "base_url": constants.DEFAULT_API_BASE_URL,
        "timeout": 30,
        "max_retries": 3,
        "verify_ssl": True,
    },
    "display": {
        "timezone": constants.DEFAULT_TIMEZONE,
        "datetime_format": constants.DEFAULT_DATETIME_FORMAT,
    },
    "table": {
        "hide_falsy_values": True,
    },
    "logging": {
        "level": "INFO",
        "file": "logs/weather_profiles.log",
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into ``base`` (in place)."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'. Only an explicitly named file
                        is required to exist.
        """
        self._explicit = config_file is not None or bool(os.getenv("CONFIG_FILE"))
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file over the defaults."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if self._explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file must contain a JSON object: {self.config_file}")

        _merge(self.config, loaded)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("API_BASE_URL"):
            self.config["api"]["base_url"] = os.getenv("API_BASE_URL")

        if os.getenv("DISPLAY_TIMEZONE"):
            self.config["display"]["timezone"] = os.getenv("DISPLAY_TIMEZONE")

        if os.getenv("LOG_LEVEL"):
            self.config["logging"]["level"] = os.getenv("LOG_LEVEL")

        if os.getenv("ENVIRONMENT"):
            self.config["environment"] = os.getenv("ENVIRONMENT")

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present and sane."""
        required_config = {
            "api": ["base_url", "timeout", "max_retries"],
            "display": ["timezone", "datetime_format"],
        }

        missing_keys = []
        for section, keys in required_config.items():
            for key in keys:
                if self.get(f"{section}.{key}") in (None, ""):
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

        timeout = self.get("api.timeout")
        if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout <= 0:
            raise ValueError(f"api.timeout must be a positive number, got {timeout!r}")

        retries = self.get("api.max_retries")
        if not isinstance(retries, int) or isinstance(retries, bool) or retries < 0:
            raise ValueError(f"api.max_retries must be a non-negative integer, got {retries!r}")

        # Raises ValueError for unknown zones
        DateUtils.parse_timezone(self.display_timezone)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'api.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def api_base_url(self) -> str:
        """Get API base URL."""
        return self.get("api.base_url", constants.DEFAULT_API_BASE_URL)

    @property
    def api_timeout(self) -> int:
        """Get API timeout in seconds."""
        return self.get("api.timeout", 30)

    @property
    def api_max_retries(self) -> int:
        """Get maximum API retry attempts."""
        return self.get("api.max_retries", 3)

    @property
    def api_verify_ssl(self) -> bool:
        """Get API SSL verification setting."""
        return self.get("api.verify_ssl", True)

    @property
    def display_timezone(self) -> str:
        """Get timezone used to render timestamps."""
        return self.get("display.timezone", constants.DEFAULT_TIMEZONE)

    @property
    def display_datetime_format(self) -> str:
        """Get strftime format used to render timestamps."""
        return self.get("display.datetime_format", constants.DEFAULT_DATETIME_FORMAT)

    @property
    def table_hide_falsy(self) -> bool:
        """Whether zero readings render as the missing-value sentinel in tables."""
        return self.get("table.hide_falsy_values", True)

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path."""
        return self.get("logging.file")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, env={self.get('environment')})"

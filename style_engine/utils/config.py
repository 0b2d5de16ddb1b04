"""
Configuration utility for the style engine.
"""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional

from ..errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "console_level": "WARNING",
        "file_level": "DEBUG",
        "file": None,
    },
    "style": {
        "media_type": "screen",
    },
}


def get_default_config_path() -> str:
    return os.path.join(os.path.expanduser("~"), ".wink_style", "config.json")


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


class Config:
    """
    Configuration manager for the style engine.

    Values from the JSON file are layered over DEFAULT_CONFIG. A file given
    explicitly must be readable; the default file is optional.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the config file; ~/.wink_style/config.json
                when omitted

        Raises:
            ConfigError: If an explicitly given file cannot be read or parsed
        """
        self._explicit = config_path is not None
        self.config_path = config_path or get_default_config_path()
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()

        self.load()

        logger.debug(f"Configuration initialized (config_path: {self.config_path})")

    def load(self) -> None:
        """Load configuration from file, falling back to the defaults."""
        self._set_defaults()

        if not os.path.exists(self.config_path):
            if self._explicit:
                raise ConfigError(f"Configuration file not found: {self.config_path}")
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r') as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError("top level must be an object")
        except (OSError, ValueError) as e:
            if self._explicit:
                raise ConfigError(f"Error loading configuration from {self.config_path}: {e}") from e
            logger.error(f"Error loading configuration: {e}")
            return

        with self._lock:
            _merge(self.config, loaded)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def save(self) -> None:
        """Save configuration to file."""
        with self._lock:
            config_copy = copy.deepcopy(self.config)

        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(config_copy, f, indent=4)

        logger.debug(f"Configuration saved to {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'style.media_type')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            parts = key.split('.')
            config = self.config
            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    return default
                config = config[part]
            return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'logging.file')
            value: Configuration value
        """
        with self._lock:
            parts = key.split('.')
            config = self.config
            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    config[part] = {}
                config = config[part]
            config[parts[-1]] = value

    def get_all(self) -> Dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self.config)

    def _set_defaults(self) -> None:
        with self._lock:
            self.config = copy.deepcopy(DEFAULT_CONFIG)

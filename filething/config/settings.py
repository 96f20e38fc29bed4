"""
FILETHING - Configuration Management

Handles logging configuration from environment variables and files.
"""

import os
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, List, Optional
import yaml
import json

from filething.core.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
HANDLER_NAME = "filething"


def _read_config_file(path: str, known_keys: Iterable[str]) -> Dict[str, Any]:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r") as f:
        if path.endswith((".yaml", ".yml")):
            data = yaml.safe_load(f)
        elif path.endswith(".json"):
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")

    known = set(known_keys)
    for key in data:
        if key not in known:
            raise ValueError(f"Unknown configuration key: {key}")

    return data


@dataclass
class FilethingConfig:
    """Main application configuration."""

    log_level: str = "WARNING"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    @classmethod
    def from_env(cls) -> "FilethingConfig":
        """
        Load configuration from environment variables.

        Environment variables:
        - FILETHING_LOG_LEVEL: Level for the filething loggers
        - FILETHING_LOG_FORMAT: logging.Formatter format string
        """
        return cls(
            log_level=os.environ.get("FILETHING_LOG_LEVEL", cls.log_level).upper(),
            log_format=os.environ.get("FILETHING_LOG_FORMAT", cls.log_format),
        )

    @classmethod
    def from_file(cls, path: str) -> "FilethingConfig":
        """
        Load configuration from YAML or JSON file.

        Args:
            path: Path to configuration file (.yaml, .yml, or .json)

        Returns:
            FilethingConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file format is invalid, is not a mapping,
                or sets an unknown key
        """
        return cls(**_read_config_file(path, cls._keys()))

    @classmethod
    def load(cls, config_file: Optional[str] = None) -> "FilethingConfig":
        """
        Load configuration with priority: file > env > defaults.

        Args:
            config_file: Optional path to configuration file

        Returns:
            FilethingConfig instance
        """
        # Start with environment variables
        config = cls.from_env()

        # Keys set in the file take precedence
        if config_file and os.path.exists(config_file):
            for key, value in _read_config_file(config_file, cls._keys()).items():
                setattr(config, key, value)

        return config

    @classmethod
    def _keys(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log_level: {self.log_level}")

        if not self.log_format:
            raise ConfigurationError("log_format is required")


def configure_logging(config: FilethingConfig) -> logging.Logger:
    """
    Attach a stream handler to the ``filething`` logger.

    Calling it again replaces the handler installed by the previous call.
    """
    config.validate()

    root = logging.getLogger("filething")
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.log_format))
    handler.set_name(HANDLER_NAME)
    root.addHandler(handler)
    root.setLevel(config.log_level.upper())
    return root

"""
Configuration management for the interaction checker.

Handles loading, validating, and persisting configuration including the
curated store location, openFDA client settings and HTTP API settings.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

# Project root: two levels up from interaction_checker/utils/
BASE_DIR = Path(__file__).resolve().parent.parent.parent

DEFAULT_CONFIG_PATH = BASE_DIR / 'config' / 'checker_config.yaml'

API_KEY_ENV = 'OPENFDA_API_KEY'


class ConfigManager:
    """
    Manages system configuration for the checker.

    Values from the YAML file are merged over DEFAULT_CONFIG section by
    section, so a partial file only overrides what it names.
    """

    DEFAULT_CONFIG = {
        'store': {
            'path': 'data/interactions.json',
        },
        'openfda': {
            'base_url': 'https://api.fda.gov',
            'limit': 20,
            'timeout': 5.0,
            'max_retries': 0,
            'api_key': None,
            'cache_expire_after': 3600,
            'cache_max_entries': 128,
            'calls_per_minute': 240,
            'user_agent': 'FoodDrugChecker/1.0',
        },
        'api': {
            'allow_origins': ['*'],
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = config_path
        self.config: dict[str, Any] = {}

        if config_path and config_path.exists():
            self.load_config(config_path)
        else:
            logger.info("No config file found, using defaults")
            self.config = self._deep_copy_dict(self.DEFAULT_CONFIG)

    @classmethod
    def from_default_path(cls) -> 'ConfigManager':
        """Build from config/checker_config.yaml at the project root."""
        return cls(DEFAULT_CONFIG_PATH)

    def load_config(self, path: Path) -> dict[str, Any]:
        """
        Load configuration from YAML file.

        Args:
            path: Path to configuration file

        Returns:
            Loaded configuration dictionary

        Raises:
            FileNotFoundError: If config file does not exist
            yaml.YAMLError: If config file is invalid
        """
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                loaded_config = yaml.safe_load(f)

            if not loaded_config:
                logger.warning(f"Empty config file at {path}, using defaults")
                self.config = self._deep_copy_dict(self.DEFAULT_CONFIG)
            else:
                self.config = self._merge_with_defaults(loaded_config)

            self.config_path = path
            logger.info(f"Loaded configuration from {path}")

            return self.config

        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML config: {e}")
            raise

    def get_section(self, section: str) -> dict[str, Any]:
        """
        Get a copy of one configuration section.

        Raises:
            KeyError: If section not found
        """
        if section not in self.config:
            raise KeyError(f"Configuration section '{section}' not found")
        return self._deep_copy_dict(self.config[section])

    def get(self, section: str, name: str) -> Any:
        """
        Get a single configuration value.

        Raises:
            KeyError: If section or parameter not found
        """
        values = self.config.get(section, {})
        if name not in values:
            raise KeyError(f"Parameter '{section}.{name}' not found in configuration")
        return values[name]

    def store_path(self) -> Path:
        """Curated store path; relative paths resolve against the project root."""
        path = Path(self.get('store', 'path'))
        if not path.is_absolute():
            path = BASE_DIR / path
        return path

    def openfda_settings(self) -> dict[str, Any]:
        """openFDA section with the API key taken from the environment if unset."""
        settings = self.get_section('openfda')
        if not settings.get('api_key'):
            settings['api_key'] = os.environ.get(API_KEY_ENV) or None
        return settings

    def save_config(self, path: Optional[Path] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            path: Path to save to (uses self.config_path if not provided)

        Raises:
            ValueError: If no path provided and no config_path set
        """
        save_path = path or self.config_path

        if not save_path:
            raise ValueError("No path provided and no config_path set")

        try:
            save_path.parent.mkdir(parents=True, exist_ok=True)

            with open(save_path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(
                    self.config,
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    indent=2
                )

            logger.info(f"Saved configuration to {save_path}")

        except Exception as e:
            logger.error(f"Failed to save configuration: {e}")
            raise

    def get_all_config(self) -> dict[str, Any]:
        """
        Get the complete configuration dictionary.

        Returns:
            Full configuration dictionary
        """
        return self._deep_copy_dict(self.config)

    def reset_to_defaults(self) -> None:
        """Reset configuration to default values."""
        self.config = self._deep_copy_dict(self.DEFAULT_CONFIG)
        logger.info("Configuration reset to defaults")

    def _merge_with_defaults(self, loaded_config: dict) -> dict:
        """Merge loaded config with defaults to ensure all keys exist."""
        merged = self._deep_copy_dict(self.DEFAULT_CONFIG)

        for section, values in loaded_config.items():
            if section in merged and isinstance(values, dict):
                merged[section].update(values)
            else:
                merged[section] = values

        return merged

    def _deep_copy_dict(self, d: dict) -> dict:
        """Deep copy a dictionary."""
        return copy.deepcopy(d)

    def validate_config(self) -> list[str]:
        """
        Validate the current configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        store = self.config.get('store', {})
        if not isinstance(store.get('path'), str) or not store.get('path'):
            errors.append("store.path must be a non-empty string")

        openfda = self.config.get('openfda', {})
        limit = openfda.get('limit')
        if not isinstance(limit, int) or isinstance(limit, bool) or not 1 <= limit <= 1000:
            errors.append(f"openfda.limit must be an integer between 1 and 1000, got {limit!r}")

        timeout = openfda.get('timeout')
        if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout <= 0:
            errors.append(f"openfda.timeout must be a positive number, got {timeout!r}")

        retries = openfda.get('max_retries')
        if not isinstance(retries, int) or isinstance(retries, bool) or retries < 0:
            errors.append("max_retries must be a non-negative integer")

        calls = openfda.get('calls_per_minute')
        if not isinstance(calls, int) or isinstance(calls, bool) or calls < 1:
            errors.append("calls_per_minute must be a positive integer")

        entries = openfda.get('cache_max_entries')
        if not isinstance(entries, int) or isinstance(entries, bool) or entries < 1:
            errors.append("cache_max_entries must be a positive integer")

        origins = self.config.get('api', {}).get('allow_origins')
        if not isinstance(origins, list) or not all(isinstance(o, str) for o in origins):
            errors.append("api.allow_origins must be a list of strings")

        return errors

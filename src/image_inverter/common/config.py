"""Configuration loader with multi-source support."""

import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional, Type, TypeVar

import platformdirs
import toml
from pydantic import BaseModel, ValidationError

from .errors import ConfigurationError


T = TypeVar('T', bound=BaseModel)

# Separates nested keys in environment overrides: IMAGE_INVERTER_PIPELINE__WORKER_THREADS
ENV_NESTING_SEPARATOR = "__"

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads configuration from multiple sources with priority."""

    def __init__(self, app_name: str = "image-inverter", config_class: Type[T] = None) -> None:
        self.app_name = app_name
        self.config_class = config_class

    def load(self, defaults_path: Optional[Path] = None) -> T:
        """Load configuration from all sources.

        Args:
            defaults_path: Optional path to defaults.toml file

        Returns:
            Validated configuration object

        Raises:
            ConfigurationError: If a config file is missing, unparsable, or
                the merged values fail validation
        """
        try:
            return self._load(defaults_path)
        except toml.TomlDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in configuration file: {e}") from e
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}",
                errors=[".".join(str(loc) for loc in err["loc"]) for err in e.errors()],
            ) from e

    def _load(self, defaults_path: Optional[Path]) -> T:
        # 1. Start with defaults (shipped with app)
        config_dict = self._load_defaults(defaults_path)

        # 2. Merge system config
        system_config = self._load_system_config()
        if system_config:
            config_dict = self._deep_merge(config_dict, system_config)

        # 3. Merge user config
        user_config = self._load_user_config()
        if user_config:
            config_dict = self._deep_merge(config_dict, user_config)

        # 4. Override with environment variables
        config_dict = self._apply_env_overrides(config_dict)

        # 5. Validate and create Config object
        if self.config_class:
            return self.config_class(**config_dict)
        return config_dict

    def _load_defaults(self, defaults_path: Optional[Path] = None) -> Dict[str, Any]:
        """Load default configuration shipped with app."""
        if defaults_path:
            if not defaults_path.exists():
                raise ConfigurationError(
                    f"Configuration file not found: {defaults_path}",
                    path=str(defaults_path),
                )
            return toml.load(defaults_path)

        possible_paths = [
            Path.cwd() / "config" / "defaults.toml",
            Path.home() / ".config" / self.app_name / "defaults.toml",
        ]

        for path in possible_paths:
            if path.exists():
                return toml.load(path)

        return {}

    def _load_system_config(self) -> Optional[Dict[str, Any]]:
        """Load system-wide configuration."""
        if os.name == "nt":  # Windows
            system_path = (
                Path(os.environ.get("PROGRAMDATA", "C:\\ProgramData"))
                / self.app_name
                / "config.toml"
            )
        else:  # Linux/Mac
            system_path = Path(f"/etc/{self.app_name}/config.toml")

        if system_path.exists():
            return toml.load(system_path)

        return None

    def _load_user_config(self) -> Optional[Dict[str, Any]]:
        """Load user-specific configuration."""
        user_config_dir = platformdirs.user_config_dir(appname=self.app_name, appauthor=False)
        user_config_path = Path(user_config_dir) / "config.toml"

        logger.debug(f"Looking for user config: app_name={self.app_name}, path={user_config_path}, exists={user_config_path.exists()}")

        if user_config_path.exists():
            logger.debug(f"Loading user config from {user_config_path}")
            return toml.load(user_config_path)

        return None

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Override config with environment variables."""
        prefix = f"{self.app_name.upper().replace('-', '_')}_"

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(prefix):
                continue

            # IMAGE_INVERTER_PIPELINE__WORKER_THREADS -> pipeline.worker_threads
            key_path = env_key[len(prefix):].lower().split(ENV_NESTING_SEPARATOR)

            current = config
            for part in key_path[:-1]:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]

            # Values stay strings; the config model coerces them per field type
            current[key_path[-1]] = env_value

        return config

"""
User configuration management for zmkview.

Configuration sources in order of precedence:
1. Environment variables (ZMKVIEW_*)
2. Command-line provided config file
3. Config file in current directory
4. User's XDG config directory
5. Default values
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from zmkview.config.models import UserConfigData
from zmkview.core.errors import ConfigError
from zmkview.keymap.models import KeymapMetadata


logger = logging.getLogger(__name__)

ENV_PREFIX = "ZMKVIEW_"


class UserConfig:
    """Loads user configuration from YAML files and the environment."""

    def __init__(self, cli_config_path: str | Path | None = None) -> None:
        """
        Initialize the user configuration handler.

        Args:
            cli_config_path: Optional config file path provided via CLI

        Raises:
            ConfigError: If the found config file is unreadable or invalid
        """
        self._config_sources: dict[str, str] = {}
        self._loaded_path: Path | None = None
        self._config_paths = self._generate_config_paths(cli_config_path)
        self._config = self._load_config()

    @property
    def data(self) -> UserConfigData:
        return self._config

    @property
    def config_path(self) -> Path | None:
        """Path of the file the configuration was loaded from, if any."""
        return self._loaded_path

    @property
    def config_paths(self) -> list[Path]:
        return list(self._config_paths)

    def _generate_config_paths(self, cli_config_path: str | Path | None) -> list[Path]:
        """Generate a list of config paths to search in order of precedence."""
        config_paths = []

        if cli_config_path:
            config_paths.append(Path(cli_config_path).expanduser().resolve())

        config_paths.extend([Path.cwd() / "zmkview.yaml", Path.cwd() / ".zmkview.yml"])

        xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
        config_home = (
            Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
        )
        config_paths.extend(
            [
                config_home / "zmkview" / "config.yaml",
                config_home / "zmkview" / "config.yml",
            ]
        )
        return config_paths

    def _load_config(self) -> UserConfigData:
        config_data: dict[str, Any] = {}

        for path in self._config_paths:
            if not path.is_file():
                continue
            config_data = self._read_yaml(path)
            self._loaded_path = path
            self._track_file_sources(config_data, path.name)
            logger.debug("Loaded user configuration from %s", path)
            break
        else:
            logger.debug("No user configuration file found, using defaults")

        try:
            config = UserConfigData(**config_data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        self._track_env_var_sources()
        return config

    def _read_yaml(self, path: Path) -> dict[str, Any]:
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return data

    def _track_file_sources(
        self, data: dict[str, Any], filename: str, prefix: str = ""
    ) -> None:
        """Recursively record that values came from the given file."""
        for key, value in data.items():
            current_key = f"{prefix}.{key}" if prefix else key
            if isinstance(value, dict):
                self._track_file_sources(value, filename, current_key)
            else:
                self._config_sources[current_key] = f"file:{filename}"

    def _track_env_var_sources(self) -> None:
        for env_name in os.environ:
            if not env_name.startswith(ENV_PREFIX):
                continue
            config_key = env_name[len(ENV_PREFIX) :].lower().replace("__", ".")
            if config_key.split(".")[0] in UserConfigData.model_fields:
                self._config_sources[config_key] = "environment"

    def get_source(self, key: str) -> str:
        """Return where a configuration value came from."""
        return self._config_sources.get(key, "default")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dotted key, e.g. ``metadata.name``."""
        value: Any = self._config
        for part in key.split("."):
            if not hasattr(value, part):
                return default
            value = getattr(value, part)
        return value

    def keymap_metadata(self, total_keys: int) -> KeymapMetadata:
        """Metadata template for parsed keymaps."""
        return self._config.metadata.to_metadata(total_keys)


def create_user_config(cli_config_path: str | Path | None = None) -> UserConfig:
    """Create a UserConfig instance."""
    return UserConfig(cli_config_path=cli_config_path)

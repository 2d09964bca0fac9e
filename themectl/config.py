"""Configuration management for themectl.

Settings come from ``config.toml`` in the configuration directory
(``~/.themectl`` by default) and may be overridden by environment variables.
Configuration only feeds the command-line interface; the loading API takes
explicit arguments.
"""

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigError
from .theme_set import THEME_EXTENSION

OUTPUT_FORMATS = ("table", "json", "yaml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_OVERRIDES = {
    "THEMECTL_THEMES_DIR": "themes_dir",
    "THEMECTL_OUTPUT_FORMAT": "output_format",
    "THEMECTL_LOG_LEVEL": "log_level",
}


class LoaderConfig(BaseModel):
    """Effective configuration for the command-line interface."""

    themes_dir: Optional[Path] = Field(None, description="Default folder to load themes from")
    extension: str = Field(default=THEME_EXTENSION, description="Theme file suffix")
    output_format: str = Field(default="table", description="Output format")
    log_level: str = Field(default="WARNING", description="Minimum log level")

    @field_validator("themes_dir")
    @classmethod
    def expand_themes_dir(cls, v: Optional[Path]) -> Optional[Path]:
        """Expand ``~`` in the themes folder."""
        if v is None:
            return v
        return v.expanduser()

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Validate extension is a dotted suffix."""
        if not v.startswith(".") or len(v) < 2:
            raise ValueError("Extension must start with '.' and name a suffix, e.g. '.tmTheme'")
        if "/" in v or os.sep in v:
            raise ValueError("Extension cannot contain path separators")
        return v

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format."""
        v = v.lower()
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of: {', '.join(OUTPUT_FORMATS)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {', '.join(LOG_LEVELS)}")
        return v


class ConfigManager:
    """Loads themectl configuration from file and environment."""

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """Initialize configuration manager.

        Args:
            config_dir: Configuration directory path. If None, uses default.
        """
        self.config_dir = config_dir or Path.home() / ".themectl"
        self.config_file = self.config_dir / "config.toml"
        self._config: Optional[LoaderConfig] = None

    def get_config(self) -> LoaderConfig:
        """Get the effective configuration, loading it on first use.

        Returns:
            File settings with environment overrides applied

        Raises:
            ConfigError: If the file is malformed or a value is invalid
        """
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> LoaderConfig:
        """Read the configuration file and environment afresh.

        Raises:
            ConfigError: If the file is malformed or a value is invalid
        """
        data = self._read_file()
        data.update(self.get_environment_config())
        try:
            return LoaderConfig(**data)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first.get("loc", ()))
            raise ConfigError(
                f"Invalid configuration value for '{field}': {first.get('msg')}",
                details={"source": str(self.config_file)},
            ) from e

    def get_environment_config(self) -> Dict[str, Any]:
        """Get configuration overrides from environment variables.

        Returns:
            Mapping of setting name to value for every variable that is set
        """
        overrides: Dict[str, Any] = {}
        for env_name, setting in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                overrides[setting] = value
        return overrides

    def _read_file(self) -> Dict[str, Any]:
        """Load settings from the configuration file, if present."""
        if not self.config_file.exists():
            return {}

        try:
            with open(self.config_file, "rb") as f:
                config_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse {self.config_file}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read {self.config_file}: {e}") from e

        section = config_data.get("themes", {})
        if not isinstance(section, dict):
            raise ConfigError(f"{self.config_file}: [themes] must be a table")

        unknown = sorted(key for key in section if key not in LoaderConfig.model_fields)
        if unknown:
            raise ConfigError(f"{self.config_file}: unsupported keys: {', '.join(unknown)}")

        return dict(section)

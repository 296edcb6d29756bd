"""Configuration management for depverify using Pydantic models."""

import json
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

CONFIG_FILE_NAME = ".depverify.json"
DEFAULT_FILE_TYPES = frozenset({"jar"})


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.INFO

    model_config = ConfigDict(use_enum_values=True, frozen=True)


class VerifyConfig(BaseModel):
    """Complete depverify configuration model.

    Field names follow the plugin-style camelCase keys (``fileTypes``,
    ``ignoreFiles``) in config files, snake_case in Python code.
    """
    file_types: frozenset[str] = Field(alias="fileTypes", default=DEFAULT_FILE_TYPES)
    directories: list[Path] = Field(default_factory=list)
    distributions: list[Path] = Field(default_factory=list)
    ignore_files: list[str] = Field(alias="ignoreFiles", default_factory=list)
    verbose: bool = False
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def drop_unset_values(cls, data: Any) -> Any:
        """Treat explicit nulls as unset so the defaults apply."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("file_types")
    @classmethod
    def normalize_file_types(cls, v):
        # ".jar" and "jar" name the same extension
        return frozenset(file_type[1:] if file_type.startswith(".") else file_type for file_type in v)

    def merged(self, **overrides: Any) -> "VerifyConfig":
        """Return a copy with every non-None override applied.

        Overrides are validated like file values, so CLI input goes through
        the same normalization as the config file.
        """
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        data = self.model_dump()
        data.update(updates)
        return VerifyConfig.model_validate(data)


def load_config(config_path: str | Path | None = None) -> VerifyConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .depverify.json

    Returns:
        VerifyConfig: Loaded and validated configuration

    Raises:
        FileNotFoundError: If config file specified but not found
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            return create_default_config()
    else:
        config_path = Path(config_path)
        if not config_path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e

    if not isinstance(config_data, dict):
        raise ValueError(f"Config file {config_path} must contain a JSON object")

    try:
        config = VerifyConfig.model_validate(config_data)
    except ValidationError as e:
        raise ValueError(f"Failed to load config from {config_path}: {e}") from e

    return _resolve_relative_paths(config, config_path.resolve().parent)


def _resolve_relative_paths(config: VerifyConfig, base_dir: Path) -> VerifyConfig:
    """Anchor relative source paths at the directory holding the config file."""
    return config.model_copy(update={
        "directories": [p if p.is_absolute() else base_dir / p for p in config.directories],
        "distributions": [p if p.is_absolute() else base_dir / p for p in config.distributions],
    })


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .depverify.json configuration file by searching up directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> VerifyConfig:
    """Create default configuration: jar files, no sources, no ignores."""
    return VerifyConfig()

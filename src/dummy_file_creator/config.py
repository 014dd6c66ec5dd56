"""
Configuration management for dummy-file-creator.

Loads configuration from YAML. Every value must be given explicitly; the
package ships a complete default ``config.yaml`` next to this module.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from dummy_file_creator.services.byte_size import parse_size

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "ConfigurationError",
    "GenerationConfig",
    "LoggingConfig",
    "ProgressConfig",
    "ServiceConfig",
    "Settings",
    "clear_settings_cache",
    "get_config_path",
    "get_settings",
    "load_settings",
    "load_settings_file",
    "load_yaml_config",
]

CONFIG_ENV_VAR = "DUMMY_FILE_CREATOR_CONFIG"

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""

    pass


class ServiceConfig(BaseModel):
    """Tool identity configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str
    version: str


class GenerationConfig(BaseModel):
    """Defaults applied when the CLI leaves a value unspecified."""

    model_config = ConfigDict(extra="forbid")

    default_size: str
    default_buffer_size: str
    fill_with_zeros: bool

    @field_validator("default_size", "default_buffer_size")
    @classmethod
    def validate_size_text(cls, value: str) -> str:
        _, ok = parse_size(value)
        if not ok:
            raise ValueError(f"not a valid size: {value!r}")
        return value


class ProgressConfig(BaseModel):
    """Progress display configuration."""

    model_config = ConfigDict(extra="forbid")

    completion_delay_seconds: float
    """How long the final progress state stays visible."""

    @field_validator("completion_delay_seconds")
    @classmethod
    def validate_delay(cls, value: float) -> float:
        if value < 0:
            raise ValueError("completion_delay_seconds must not be negative")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str
    format: Literal["json", "text"]


class Settings(BaseModel):
    """
    Root configuration container.

    All fields are REQUIRED. No defaults exist.
    Missing fields cause an immediate configuration error.

    Usage:
        from dummy_file_creator.config import get_settings
        settings = get_settings()
    """

    model_config = ConfigDict(extra="forbid")

    service: ServiceConfig
    generation: GenerationConfig
    progress: ProgressConfig
    logging: LoggingConfig


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """
    Read a settings file into a plain mapping.

    Raises:
        ConfigurationError: If the file is missing, unreadable YAML, empty,
            or not a mapping at the top level
    """
    if not config_path.is_file():
        raise ConfigurationError(
            f"Settings file not found: {config_path.absolute()}\n"
            f"Pass --config or point {CONFIG_ENV_VAR} at a settings file."
        )

    try:
        config = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Cannot parse {config_path} as YAML: {e}") from e

    if config is None:
        raise ConfigurationError(f"Settings file is empty: {config_path}")

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"{config_path} must hold a YAML mapping, not a {type(config).__name__}"
        )

    return config


def load_settings(yaml_config: dict[str, Any]) -> Settings:
    """Validate a raw mapping into Settings, wrapping pydantic errors."""
    try:
        return Settings.model_validate(yaml_config)
    except ValidationError as e:
        raise ConfigurationError(f"Settings validation failed: {e}") from e


def load_settings_file(config_path: Path) -> Settings:
    """Load and validate settings from an explicit file, bypassing the cache."""
    return load_settings(load_yaml_config(config_path))


def get_config_path() -> Path:
    """Settings path from DUMMY_FILE_CREATOR_CONFIG, else the packaged config.yaml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else DEFAULT_CONFIG_PATH


@lru_cache
def get_settings() -> Settings:
    """Load settings once from the resolved configuration path."""
    return load_settings_file(get_config_path())


def clear_settings_cache() -> None:
    get_settings.cache_clear()

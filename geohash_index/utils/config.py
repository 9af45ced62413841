"""
Configuration management using Pydantic for validation.

This module provides type-safe configuration loading and validation
for the geohash-index command line. Library functions take explicit
arguments and never read this configuration themselves.
"""
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from geohash_index.core.geohash import MAX_PRECISION
from geohash_index.utils.exceptions import ConfigurationError


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class CodecSettings(BaseModel):
    """Encoding defaults."""
    default_precision: int = Field(8, ge=1, le=MAX_PRECISION, description="Geohash length used when none is given")


class CircleSettings(BaseModel):
    """Widening circle defaults."""
    expand_step: int = Field(1, ge=1, description="Characters dropped per expansion")
    default_radius_km: Optional[float] = Field(None, gt=0.0, description="Radius to cover when none is given (km)")


class LoggingSettings(BaseModel):
    """Logging output settings."""
    level: str = Field("INFO", description="Logging level")
    json_output: bool = Field(False, description="Render logs as JSON")
    log_file: Optional[Path] = None

    @field_validator('level', mode='before')
    @classmethod
    def normalise_level(cls, v):
        """Accept any case, store upper-case."""
        v = str(v).upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"level must be one of {list(LOG_LEVELS)}, got {v}")
        return v

    @field_validator('log_file', mode='before')
    @classmethod
    def expand_env_vars(cls, v):
        """Expand environment variables in the log path."""
        if isinstance(v, str):
            return Path(os.path.expandvars(v))
        return v


class GeohashIndexConfig(BaseModel):
    """Complete command line configuration."""
    codec: CodecSettings = Field(default_factory=CodecSettings)
    circle: CircleSettings = Field(default_factory=CircleSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_config(config_path: Path) -> GeohashIndexConfig:
    """
    Load and validate configuration from YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Validated GeohashIndexConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If YAML is malformed or validation fails

    Example:
        >>> config = load_config(Path("config/geohash.yaml"))
        >>> config.codec.default_precision
        8
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        try:
            config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed YAML in {config_path}: {e}") from e

    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(config_dict).__name__}"
        )

    try:
        return GeohashIndexConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config in {config_path}: {e}") from e


def get_default_config() -> GeohashIndexConfig:
    """
    Get default configuration template.

    Returns:
        Default GeohashIndexConfig
    """
    return GeohashIndexConfig()

"""Configuration for the fskit command line."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

# Default configuration location
CONFIG_DIR = Path.home() / ".fskit"
CONFIG_FILE = "config.yaml"


class ConfigError(Exception):
    """Error loading configuration."""

    pass


class FsKitConfig(BaseModel):
    """Defaults applied by the command line."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    default_max_depth: int = Field(default=0, ge=0, alias="defaultMaxDepth")
    follow_symlinks: bool = Field(default=True, alias="followSymlinks")

    @classmethod
    def from_file(cls, path: Path) -> FsKitConfig:
        """Load configuration from a YAML file.

        A missing file yields the defaults.

        Args:
            path: Path to the YAML file.

        Returns:
            Parsed FsKitConfig.

        Raises:
            ConfigError: If the file is unreadable, not valid YAML, or holds
                invalid values.
        """
        if not path.exists():
            logger.debug("No config at %s, using defaults", path)
            return cls()

        try:
            data = yaml.safe_load(path.read_text()) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config {path}: {e}") from e


def default_config_path() -> Path:
    """Return the default configuration file path."""
    return CONFIG_DIR / CONFIG_FILE


def load_config(path: Path | None = None) -> FsKitConfig:
    """Load configuration from ``path`` or the default location."""
    return FsKitConfig.from_file(path or default_config_path())

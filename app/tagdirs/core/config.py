"""User configuration for tagdirs.

Configuration is stored in ~/.config/tagdirs/config.toml, for example::

    marker_prefix = ".tag-"
    default_roots = ["/media/budi", "/media/ujang"]
    lacks_files = [".git"]
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tagdirs.core.paths import ensure_config_dir, get_config_path
from tagdirs.locator.models import DEFAULT_MARKER_PREFIX, FilterSpec

logger = logging.getLogger(__name__)


class TagdirsConfig(BaseModel):
    """Configuration for tagdirs.

    Attributes:
        marker_prefix: Prefix joined with a tag name to form its marker file.
        default_roots: Roots searched when none are given on the command line.
        lacks_files: File names always excluded, on top of command-line filters.
    """

    model_config = ConfigDict(extra="forbid")

    marker_prefix: Annotated[
        str,
        Field(min_length=1, description="Marker file prefix"),
    ] = DEFAULT_MARKER_PREFIX
    default_roots: Annotated[
        list[str],
        Field(description="Roots searched when none are given"),
    ] = []
    lacks_files: Annotated[
        list[str],
        Field(description="File names always excluded"),
    ] = []

    @field_validator("marker_prefix")
    @classmethod
    def validate_marker_prefix(cls, v: str) -> str:
        if "/" in v:
            msg = f"marker_prefix cannot contain '/': {v!r}"
            raise ValueError(msg)
        return v

    def build_filter(
        self,
        *,
        has_tags: list[str] | None = None,
        lacks_tags: list[str] | None = None,
        has_files: list[str] | None = None,
        lacks_files: list[str] | None = None,
    ) -> FilterSpec:
        """Build a FilterSpec from command-line criteria and this config.

        Configured ``lacks_files`` are appended after the given ones.

        Raises:
            ValueError: If a tag or file name is invalid.
        """
        given = FilterSpec(
            has_tags=tuple(has_tags or ()),
            lacks_tags=tuple(lacks_tags or ()),
            has_files=tuple(has_files or ()),
            lacks_files=tuple(lacks_files or ()),
            marker_prefix=self.marker_prefix,
        )
        return given.merged(lacks_files=self.lacks_files)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> TagdirsConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated TagdirsConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return TagdirsConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> TagdirsConfig:
    """Load configuration, falling back to defaults if the file is missing.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file at %s, using defaults", path or get_config_path())
        return TagdirsConfig()


def save_config(config: TagdirsConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The TagdirsConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    if path is None:
        try:
            config_path = ensure_config_dir() / get_config_path().name
        except RuntimeError as e:
            raise ConfigError(str(e)) from e
    else:
        config_path = path

    data = config_to_dict(config)

    tmp_path: Path | None = None
    try:
        if path is not None:
            config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: TagdirsConfig) -> dict[str, object]:
    """Convert TagdirsConfig to a dictionary for TOML serialization.

    Only non-default values are included, except ``marker_prefix`` which
    is always written so the file documents the convention in use.
    """
    result: dict[str, object] = {"marker_prefix": config.marker_prefix}

    if config.default_roots:
        result["default_roots"] = list(config.default_roots)

    if config.lacks_files:
        result["lacks_files"] = list(config.lacks_files)

    return result

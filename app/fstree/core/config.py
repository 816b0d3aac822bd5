"""fstree configuration and settings.

Configuration is stored in ~/.config/fstree/config.toml. Every key is
optional; a missing file means defaults.

Example::

    show_hidden = false
    max_render_depth = 3
    log_level = "INFO"

    [colors]
    directory = "#69B9A1"
    denied = "#f53263"
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fstree.core.paths import get_config_path

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class DisplayColors(BaseModel):
    """Colors used by the CLI output.

    All colors must be valid hex codes (#RRGGBB or #RGB).
    """

    model_config = ConfigDict(extra="forbid")

    # Entry colors
    directory: str = "#69B9A1"
    file: str = "#ffffff"
    denied: str = "#f53263"

    # Base colors
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    # Semantic colors
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are valid hex codes."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        if not color.startswith("#"):
            msg = f"{info.field_name}: color must start with '#'"
            raise ValueError(msg)
        color_part = color[1:]
        if len(color_part) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        try:
            int(color_part, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg) from None
        return color


class TreeConfig(BaseModel):
    """User configuration for fstree.

    Attributes:
        show_hidden: Include dot-entries when building a tree.
        max_render_depth: Deepest level rendered by ``fstree show`` (None = all).
        log_level: Default log level when neither --verbose nor --quiet is given.
        colors: Output colors.
    """

    model_config = ConfigDict(extra="forbid")

    show_hidden: Annotated[
        bool,
        Field(description="Include entries whose name starts with a dot"),
    ] = True
    max_render_depth: Annotated[
        int | None,
        Field(ge=0, description="Deepest level rendered (None = unlimited)"),
    ] = None
    log_level: Annotated[
        LogLevel,
        Field(description="Default log level"),
    ] = "WARNING"
    colors: DisplayColors = Field(default_factory=DisplayColors)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> TreeConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated TreeConfig object.

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
        return TreeConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> TreeConfig:
    """Load configuration, falling back to defaults.

    A missing file silently yields defaults; an unreadable or invalid file
    is logged and also yields defaults.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        return TreeConfig()
    except ConfigError as e:
        logger.warning("Ignoring invalid configuration: %s", e)
        return TreeConfig()


def save_config(config: TreeConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The TreeConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # TOML has no null, so unset optionals are left out
    data = config.model_dump(exclude_none=True)

    tmp_path: Path | None = None
    try:
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

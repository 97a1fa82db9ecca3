"""User configuration.

Defaults for the CLI options and console colors can be set in
~/.config/file-contents/config.toml:

    [defaults]
    extensions = ["py", "toml"]
    output = "console"
    git = "changed"
    recursive = true

    [colors]
    info = "#0ec1c8"

The file is optional and never written by the tool.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from filecontents.core.paths import get_config_path
from filecontents.models.selection import GitMode, OutputMode

logger = logging.getLogger(__name__)

# Extension used when neither the command line nor the config file names one
DEFAULT_EXTENSIONS: tuple[str, ...] = ("cs",)


class DefaultsConfig(BaseModel):
    """Default values for CLI options.

    Attributes:
        folder: Folder to read files from.
        recursive: Search subdirectories.
        output: Output destination.
        extensions: Extensions to include; an empty list includes every file.
        git: Git working-tree scope.
    """

    model_config = ConfigDict(extra="forbid")

    folder: Annotated[Path, Field(description="Folder to read files from")] = Path(".")
    recursive: Annotated[bool, Field(description="Search subdirectories")] = False
    output: Annotated[OutputMode, Field(description="Output destination")] = OutputMode.CLIPBOARD
    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="Extensions to include (empty = all files)",
    )
    git: Annotated[GitMode, Field(description="Git working-tree scope")] = GitMode.NONE


class AppConfig(BaseModel):
    """Top-level configuration file model.

    The ``colors`` table is validated separately by the theme loader so a
    bad color never prevents the tool from running.
    """

    model_config = ConfigDict(extra="forbid")

    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    colors: dict[str, str] = Field(default_factory=dict)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated AppConfig. Built-in defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return AppConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return AppConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e

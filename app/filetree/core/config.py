"""User settings for filetree.

Settings are stored in ~/.config/filetree/config.toml. A missing file
means all defaults apply.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from filetree.core.paths import get_config_path
from filetree.tree.sanitize import DEFAULT_REPLACEMENT, contains_illegal_chars


class FiletreeConfig(BaseModel):
    """Settings applied by the CLI.

    Attributes:
        replacement: Default replacement for illegal filename characters.
        confirm: Ask for confirmation before destructive commands.
        dry_run: Default to dry-run mode for deletions.
    """

    model_config = ConfigDict(extra="forbid")

    replacement: Annotated[
        str,
        Field(description="Replacement for illegal filename characters"),
    ] = DEFAULT_REPLACEMENT
    confirm: Annotated[
        bool,
        Field(description="Ask before deleting"),
    ] = True
    dry_run: Annotated[
        bool,
        Field(description="Simulate deletions by default"),
    ] = False

    @field_validator("replacement")
    @classmethod
    def validate_replacement(cls, v: str) -> str:
        """Reject replacements that would reintroduce illegal characters."""
        if contains_illegal_chars(v):
            msg = f"replacement contains an illegal filename character: {v!r}"
            raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid TOML."""


def load_config(path: Path | None = None) -> FiletreeConfig:
    """Load settings from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default path.

    Returns:
        Validated FiletreeConfig. Defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or fails validation.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return FiletreeConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return FiletreeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: FiletreeConfig, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written to a temporary file first and then moved into
    place with os.replace().

    Args:
        config: Settings to save.
        path: Destination. If None, uses the default path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def require_config(path: Path | None = None) -> FiletreeConfig:
    """Load settings or exit with a helpful error message.

    Args:
        path: Optional custom config path.

    Returns:
        Loaded and validated FiletreeConfig.

    Raises:
        typer.Exit: If the config cannot be loaded.
    """
    import typer

    from filetree.utils.formatting import print_error, print_info

    config_path = path or get_config_path()
    try:
        return load_config(config_path)
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        print_info(f"Fix or remove {config_path} to restore the defaults.")
        raise typer.Exit(code=1) from e

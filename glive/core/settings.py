"""
Settings sources for glive.

Configuration comes from, highest priority first:

1. GLIVE_<SECTION>__<KEY> environment variables (GLIVE_BUILD__SUITE=sid)
2. .glive/config.toml, or the [tool.glive] table of pyproject.toml, found
   from the working directory upwards
3. Model defaults

A config file that cannot be read or parsed is reported and skipped; a file
whose values have the wrong type is an error.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .exceptions import ConfigFileError
from .models.config import BuildConfig, ChangelistConfig, LoggingConfig

# Module logger, not ILogger: the ILogger service is itself built from
# these settings.
log = logging.getLogger(__name__)

CONFIG_DIR = ".glive"
CONFIG_NAME = "config.toml"


@dataclass
class ConfigFile:
    """Tables read from one config file, or why it could not be used."""

    path: Path | None = None
    data: dict[str, Any] = field(default_factory=dict)
    error: str | None = None


def _glive_table(pyproject: Path) -> dict[str, Any] | None:
    try:
        with open(pyproject, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        log.debug("Skipping %s: %s", pyproject, e)
        return None
    return data.get("tool", {}).get("glive")


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find the nearest config file from start_dir (or cwd) upwards.

    In each directory .glive/config.toml wins over a pyproject.toml; a
    pyproject.toml only counts if it has a [tool.glive] table.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for directory in (start, *start.parents):
        candidate = directory / CONFIG_DIR / CONFIG_NAME
        if candidate.is_file():
            return candidate
        pyproject = directory / "pyproject.toml"
        if pyproject.is_file() and _glive_table(pyproject) is not None:
            return pyproject

    return None


def read_config_file(path: Path | None) -> ConfigFile:
    """Parse a config file; read and TOML errors end up in .error."""
    if path is None:
        return ConfigFile()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        log.warning("Failed to parse config file %s: %s", path, e)
        return ConfigFile(path=path, error=f"Failed to parse config file: {e}")
    except OSError as e:
        log.warning("Failed to read config file %s: %s", path, e)
        return ConfigFile(path=path, error=f"Failed to read config file: {e}")

    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get("glive", {})
    log.debug("Loaded config from %s", path)
    return ConfigFile(path=path, data=data)


class GliveSettings(BaseSettings):
    """All config sections, merged from the environment and a config file.

    The file's tables are passed as constructor arguments; the source
    order below puts those under the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="GLIVE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    build: BuildConfig = Field(default_factory=BuildConfig)
    changelist: ChangelistConfig = Field(default_factory=ChangelistConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (env_settings, init_settings)


def _describe(error: ValidationError) -> str:
    problems = [
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in error.errors()
    ]
    return "Invalid configuration: " + "; ".join(problems)


def load_settings(config_file: ConfigFile) -> GliveSettings:
    """
    Merge config_file with the environment.

    Raises:
        ConfigFileError: If a value has the wrong type, e.g. an unquoted
            version = 2024.01
    """
    try:
        return GliveSettings(**config_file.data)
    except ValidationError as e:
        file_path = str(config_file.path) if config_file.path else None
        raise ConfigFileError(_describe(e), file_path=file_path) from e

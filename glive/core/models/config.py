"""
Config file sections.

Each section maps one TOML table (or GLIVE_<SECTION>__<KEY> variables).
Unlike the build records these models coerce, since environment values
always arrive as strings, and they ignore keys they do not know.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class BuildConfig(ConfigBaseModel):
    """Default grml-live options, overridden by command-line flags.

    A blank value in the file means "not set", the same rule the build
    options follow, so `suite = ""` does not mask a later default.
    """

    architecture: str | None = None
    classes: str | None = None
    suite: str | None = None
    build_only: bool | None = None
    extract_iso: str | None = None
    output_directory: str | None = None
    version: str | None = None
    version_from_date: bool | None = None
    codename: str | None = None
    name: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ChangelistConfig(ConfigBaseModel):
    """Default changelist options."""

    output_filename: str | None = None
    dpkg_list_old_name: str | None = None
    package_prefix: str | None = None
    git_url_base: str | None = None


class LoggingConfig(ConfigBaseModel):
    """Where glive writes its own diagnostics (not the build log)."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = True

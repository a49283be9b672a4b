"""
Changelist models.

Options for the changelist step and the classified difference between two
dpkg package lists.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from .base import ImmutableModel

DEFAULT_OUTPUT_FILENAME = "changelog.txt"
DEFAULT_DPKG_LIST_OLD_NAME = "dpkg.list.old"


class ChangelistOptions(ImmutableModel):
    """Options for generating a changelog between two image builds."""

    output_filename: str = DEFAULT_OUTPUT_FILENAME
    dpkg_list_old_name: str = DEFAULT_DPKG_LIST_OLD_NAME
    package_prefix: str = ""
    git_url_base: str = ""

    @field_validator("output_filename", mode="before")
    @classmethod
    def default_output_filename(cls, v: Any) -> Any:
        """Fall back to changelog.txt for empty values."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_OUTPUT_FILENAME
        return v

    @field_validator("dpkg_list_old_name", mode="before")
    @classmethod
    def default_dpkg_list_old_name(cls, v: Any) -> Any:
        """Fall back to dpkg.list.old for empty values."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_DPKG_LIST_OLD_NAME
        return v

    @field_validator("package_prefix", "git_url_base", mode="before")
    @classmethod
    def empty_for_none(cls, v: Any) -> Any:
        """Treat a missing prefix or URL base as empty."""
        return "" if v is None else v


class OwnPackageChange(ImmutableModel):
    """A change to a package built from the distribution's own git repos."""

    name: str
    old_version: str | None = None
    new_version: str | None = None

    @property
    def removed(self) -> bool:
        return self.new_version is None

    @property
    def revision_range(self) -> str:
        """Git revision range covering this change, e.g. v0.1..v0.2."""
        if self.new_version is None:
            raise ValueError(f"{self.name} was removed and has no revision range")
        new = f"v{self.new_version}"
        if self.old_version is not None:
            return f"v{self.old_version}..{new}"
        return new


class PackageChanges(ImmutableModel):
    """Classified difference between an old and a new package list."""

    own: list[OwnPackageChange] = Field(default_factory=list)
    debian_added: list[str] = Field(default_factory=list)
    debian_changed: list[str] = Field(default_factory=list)
    debian_removed: list[str] = Field(default_factory=list)

"""
grml-live build option models.

BuildOptions is the flat record a build step is configured with. The
OPTION_FIELDS table lists every field once, with an accessor, so passes
that treat all options alike (normalization, merging config defaults)
iterate the table instead of looking attributes up by name.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .base import ImmutableModel


class BuildOptions(ImmutableModel):
    """Options for one grml-live invocation.

    Every field is optional. String fields that hold only whitespace are
    treated as absent once normalize() has run.
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

    def normalize(self) -> BuildOptions:
        """Return a copy with whitespace-only string fields set to None."""
        blank = {
            field.name: None
            for field in OPTION_FIELDS
            if field.is_text and _is_blank(field.get(self))
        }
        if not blank:
            return self
        return self.model_copy(update=blank)

    @classmethod
    def from_sources(
        cls,
        defaults: Mapping[str, Any] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> BuildOptions:
        """Build options from config defaults layered under explicit values.

        An override of None (flag not given) leaves the default in place.

        Args:
            defaults: Values from the [build] config section
            overrides: Values given on the command line

        Returns:
            BuildOptions, not yet normalized
        """
        defaults = defaults or {}
        overrides = overrides or {}
        values: dict[str, Any] = {}
        for field in OPTION_FIELDS:
            value = overrides.get(field.name)
            if value is None:
                value = defaults.get(field.name)
            if value is not None:
                values[field.name] = value
        return cls(**values)


@dataclass(frozen=True)
class OptionField:
    """Descriptor for one BuildOptions field."""

    name: str
    get: Callable[[BuildOptions], Any]
    is_text: bool = True


OPTION_FIELDS: tuple[OptionField, ...] = (
    OptionField("architecture", lambda o: o.architecture),
    OptionField("classes", lambda o: o.classes),
    OptionField("suite", lambda o: o.suite),
    OptionField("build_only", lambda o: o.build_only, is_text=False),
    OptionField("extract_iso", lambda o: o.extract_iso),
    OptionField("output_directory", lambda o: o.output_directory),
    OptionField("version", lambda o: o.version),
    OptionField("version_from_date", lambda o: o.version_from_date, is_text=False),
    OptionField("codename", lambda o: o.codename),
    OptionField("name", lambda o: o.name),
)


def _is_blank(value: Any) -> bool:
    return isinstance(value, str) and not value.strip()


def normalize(options: BuildOptions) -> BuildOptions:
    """Replace every whitespace-only string option with None."""
    return options.normalize()


class ResolvedFields(ImmutableModel):
    """Values derived from BuildOptions and the build environment."""

    version: str
    release_name: str
    build_name: str
    output_directory: str
    user: str | None = None

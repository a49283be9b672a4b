"""
Validation of user-supplied build step values.

Checks return a ValidationResult instead of raising, so callers can show
warnings and still proceed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Severity = Literal["ok", "warning", "error"]

MIN_NAME_LENGTH = 4


@dataclass
class ValidationResult:
    """Result of a validation check."""

    severity: Severity
    messages: list[str] = field(default_factory=list)

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(severity="ok")

    @classmethod
    def warning(cls, *messages: str) -> ValidationResult:
        return cls(severity="warning", messages=list(messages))

    @classmethod
    def error(cls, *messages: str) -> ValidationResult:
        return cls(severity="error", messages=list(messages))

    @property
    def valid(self) -> bool:
        """Warnings still count as valid."""
        return self.severity != "error"

    def __bool__(self) -> bool:
        return self.valid


def validate_name(value: str | None) -> ValidationResult:
    """
    Check a grml name (grml-live -g).

    Args:
        value: Name as typed by the user

    Returns:
        error if empty, warning if shorter than four characters, else ok
    """
    if not value:
        return ValidationResult.error("Please set a name")
    if len(value) < MIN_NAME_LENGTH:
        return ValidationResult.warning("Isn't the name too short?")
    return ValidationResult.ok()

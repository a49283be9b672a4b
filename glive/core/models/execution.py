"""
Execution models.

Result of running an external command for a build step, and the state a
step moves through while it runs.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import Field, computed_field

from .base import ImmutableModel


class StepState(str, Enum):
    """Lifecycle of a single build step invocation."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ExecutionResult(ImmutableModel):
    """Outcome of one external command."""

    command: Annotated[list[str], Field(min_length=1)]
    exit_code: int
    launched: bool = True

    @computed_field  # type: ignore[prop-decorator]
    @property
    def succeeded(self) -> bool:
        """Check if the command succeeded (exit code 0)."""
        return self.exit_code == 0

"""
Base class for the records a build step passes around.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ImmutableModel(BaseModel):
    """Frozen, strictly typed record.

    Build options are fixed once a step is configured, and results and
    package changes only ever describe something that already happened,
    so none of them is edited in place. Derive a changed copy with
    model_copy(update=...) instead. Values are not coerced: a version
    given as a number is rejected rather than turned into a string.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

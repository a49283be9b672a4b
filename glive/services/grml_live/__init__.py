"""
grml-live build step: option resolution, command construction, execution.
"""

from .builder import GrmlLiveBuilder
from .command import (
    CommandBuilder,
    build_command,
    resolve_build_name,
    resolve_fields,
    resolve_invoking_user,
    resolve_output_directory,
    resolve_release_name,
    resolve_version,
)

__all__ = [
    "CommandBuilder",
    "GrmlLiveBuilder",
    "build_command",
    "resolve_build_name",
    "resolve_fields",
    "resolve_invoking_user",
    "resolve_output_directory",
    "resolve_release_name",
    "resolve_version",
]

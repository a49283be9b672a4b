"""
Pydantic models for glive.
"""

from .base import ImmutableModel
from .changelist import ChangelistOptions, OwnPackageChange, PackageChanges
from .config import BuildConfig, ChangelistConfig, LoggingConfig
from .execution import ExecutionResult, StepState
from .options import OPTION_FIELDS, BuildOptions, OptionField, ResolvedFields, normalize

__all__ = [
    "OPTION_FIELDS",
    "BuildConfig",
    "BuildOptions",
    "ChangelistConfig",
    "ChangelistOptions",
    "ExecutionResult",
    "ImmutableModel",
    "LoggingConfig",
    "OptionField",
    "OwnPackageChange",
    "PackageChanges",
    "ResolvedFields",
    "StepState",
    "normalize",
]

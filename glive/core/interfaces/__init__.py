"""
Interfaces for the collaborators a build step is given.

These define the contracts implementations must follow, so build steps can
run against real subprocesses and terminals or against test doubles.
"""

from .build import IBuild
from .launcher import ILauncher
from .listener import IBuildListener
from .logger import ILogger

__all__ = [
    "IBuild",
    "IBuildListener",
    "ILauncher",
    "ILogger",
]

"""
Click command implementations for glive CLI.

Each module corresponds to a glive command (e.g., build.py implements
'glive build'). Commands are registered with the main CLI group via the
register_commands() function in glive.cli.
"""

from .build import build
from .changelist import changelist
from .check_name import check_name
from .config import config

COMMANDS = [
    build,
    changelist,
    check_name,
    config,
]

__all__ = [
    "COMMANDS",
    "build",
    "changelist",
    "check_name",
    "config",
]

"""
Changelist build step: compares package lists and collects git history.
"""

from .builder import ChangelistBuilder, render_changelog
from .git_log import GitChangelog
from .packages import diff_packages, parse_package_list

__all__ = [
    "ChangelistBuilder",
    "GitChangelog",
    "diff_packages",
    "parse_package_list",
    "render_changelog",
]

"""
Output presenters for glive.
"""

from .console import ConsoleListener

__all__ = ["ConsoleListener"]

"""
glive's diagnostics log.

Every glive module logs below the "glive" stdlib logger. GliveLogger points
that logger at stderr and/or a rotating ~/.glive/glive.log according to the
[logging] config section; until then records are dropped.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger

ROOT_LOGGER = "glive"
DEFAULT_LOG_FILE = Path.home() / ".glive" / "glive.log"

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def _level(name: str) -> int:
    return logging.getLevelNamesMapping().get(name.upper(), logging.WARNING)


class GliveLogger(ILogger):
    """
    ILogger over a stdlib logger, configured from the [logging] section.

    Configuring replaces the logger's handlers, so creating a second
    GliveLogger for the same name reconfigures rather than duplicates.
    """

    def __init__(
        self,
        level: str = "warning",
        console: bool = False,
        file: bool = True,
        log_file: Path | None = None,
        name: str = ROOT_LOGGER,
    ) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        handlers: list[logging.Handler] = []
        if console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if file:
            path = log_file or DEFAULT_LOG_FILE
            path.parent.mkdir(parents=True, exist_ok=True)
            # Several MB per CI job is plenty; keep two old files
            handlers.append(
                RotatingFileHandler(path, maxBytes=5_000_000, backupCount=2, encoding="utf-8")
            )
        if not handlers:
            handlers.append(logging.NullHandler())

        formatter = logging.Formatter(LOG_FORMAT)
        for handler in handlers:
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)
        self.set_level(level)

    def set_level(self, level: str) -> None:
        """Change the threshold of every handler (debug, info, warning, error)."""
        for handler in self._logger.handlers:
            handler.setLevel(_level(level))

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def error(self, message: str, *args: Any) -> None:
        self._logger.error(message, *args)


class NullLogger(ILogger):
    """Discards everything; the default outside a bootstrapped CLI."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warning(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass

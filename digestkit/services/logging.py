"""
Logger implementation for digestkit diagnostics.

Wraps stdlib logging with configurable handlers for console (stderr) and file.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import ClassVar

from ..core.interfaces.logger import ILogger


class DigestLogger(ILogger):
    """
    Logger implementation using stdlib logging.

    Supports output to stderr and ~/.digestkit/digestkit.log.
    """

    LOG_FILE_PATH = Path.home() / ".digestkit" / "digestkit.log"
    MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB
    BACKUP_COUNT = 2

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "digestkit",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = False,
        log_file: Path | None = None,
    ) -> None:
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Initial log level (debug, info, warning, error)
            console_enabled: Enable stderr output
            file_enabled: Enable file output
            log_file: Override for the log file location
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)  # Let handlers filter
        self._logger.handlers.clear()
        self._logger.propagate = False

        self._console_handler: logging.Handler | None = None
        self._file_handler: logging.Handler | None = None

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        log_level = self._level_number(level)

        if console_enabled:
            console = logging.StreamHandler(sys.stderr)
            console.setLevel(log_level)
            console.setFormatter(formatter)
            self._logger.addHandler(console)
            self._console_handler = console

        if file_enabled:
            self._setup_file_handler(formatter, log_level, log_file or self.LOG_FILE_PATH)

    @classmethod
    def _level_number(cls, level: str) -> int:
        return cls.LEVEL_MAP.get(level.lower(), logging.WARNING)

    def _setup_file_handler(self, formatter: logging.Formatter, level: int, path: Path) -> None:
        """Set up rotating file handler."""
        path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=self.MAX_FILE_SIZE,
            backupCount=self.BACKUP_COUNT,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        self._logger.addHandler(file_handler)
        self._file_handler = file_handler

    def log(self, level: str, message: str, *args: object) -> None:
        """Forward to the stdlib logger; unknown levels are logged as warnings."""
        self._logger.log(self._level_number(level), message, *args)

    def set_level(self, level: str) -> None:
        """Set log level for all handlers."""
        lvl = self._level_number(level)
        if self._console_handler:
            self._console_handler.setLevel(lvl)
        if self._file_handler:
            self._file_handler.setLevel(lvl)

    def close(self) -> None:
        """Detach and close all handlers."""
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()
        self._console_handler = None
        self._file_handler = None


class NullLogger(ILogger):
    """No-op logger for library use and tests."""

    def log(self, level: str, message: str, *args: object) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass

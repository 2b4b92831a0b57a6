"""
Logger interface for internal diagnostic output.

digestkit is a library first: components log through this interface and
default to a no-op implementation until the application bootstraps a real
logger. CLI results are written with click.echo, never through a logger.
"""

from abc import ABC, abstractmethod


class ILogger(ABC):
    """
    Interface for internal logging.

    Implementations provide log() and set_level(); the per-level helpers
    route through log() with %-style arguments.
    """

    @abstractmethod
    def log(self, level: str, message: str, *args: object) -> None:
        """Emit a message at level debug, info, warning or error."""

    @abstractmethod
    def set_level(self, level: str) -> None:
        """Change the threshold below which messages are dropped."""

    def debug(self, message: str, *args: object) -> None:
        self.log("debug", message, *args)

    def info(self, message: str, *args: object) -> None:
        self.log("info", message, *args)

    def warning(self, message: str, *args: object) -> None:
        self.log("warning", message, *args)

    def error(self, message: str, *args: object) -> None:
        self.log("error", message, *args)

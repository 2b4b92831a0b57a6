"""Abstract interfaces shared across digestkit components."""

from .logger import ILogger

__all__ = ["ILogger"]

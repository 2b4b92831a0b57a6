"""Service implementations for digestkit."""

from .logging import DigestLogger, NullLogger

__all__ = ["DigestLogger", "NullLogger"]

"""
Pydantic models for digestkit configuration.
"""

from .config import ConfigBaseModel, DigestConfig, LoggingConfig

__all__ = [
    "ConfigBaseModel",
    "DigestConfig",
    "LoggingConfig",
]

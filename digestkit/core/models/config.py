"""
Configuration models.

Provides Pydantic models for digestkit configuration with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..patterns import is_valid_algorithm_name

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(BaseModel):
    """Base model for config sections.

    Values arrive as TOML scalars or environment strings, so coercion is
    allowed and unknown keys are ignored.
    """

    model_config = ConfigDict(
        strict=False,
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v


class DigestConfig(ConfigBaseModel):
    """Digest computation configuration section."""

    algorithm: str = "sha256"
    chunk_size: int = Field(default=1024 * 1024, gt=0)

    @field_validator("algorithm")
    @classmethod
    def validate_algorithm_name(cls, v: str) -> str:
        """Reject names that could never be registered."""
        if not is_valid_algorithm_name(v):
            raise ValueError(f"Invalid algorithm name: {v!r}")
        return v

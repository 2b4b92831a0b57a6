"""
Click context for the digestkit CLI.

Provides DigestContext, the object passed through the Click command chain
via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.bootstrap import bootstrap
from ..core.settings import DigestSettings, load_settings
from ..hashing.registry import AlgorithmRegistry, get_registry


@dataclass
class DigestContext:
    """Extended context passed through Click command chain.

    Attributes:
        settings: Merged configuration
        registry: Algorithm registry the commands resolve names against
    """

    settings: DigestSettings
    registry: AlgorithmRegistry

    @classmethod
    def create(cls, config_path: Path | None = None) -> DigestContext:
        """Load settings, bootstrap services and build the context."""
        settings = load_settings(config_path=config_path)
        bootstrap(settings)
        return cls(settings=settings, registry=get_registry())

    @property
    def chunk_size(self) -> int:
        return self.settings.digest.chunk_size

"""
Application bootstrap for digestkit.

Library users never need to call this: the default registry is created on
first use and logging stays silent. Applications (and the CLI) call
bootstrap() once at start-up to wire a configured logger into the container.
"""

from __future__ import annotations

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .settings import DigestSettings, load_settings

_initialized = False


def bootstrap(settings: DigestSettings | None = None) -> ServiceContainer:
    """
    Bootstrap digestkit.

    Registers a logger configured from settings and makes sure the
    default algorithm registry exists.

    Args:
        settings: Settings to use; loaded from config/env when omitted

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    if settings is None:
        settings = load_settings()

    _register_core_services(container, settings)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: DigestSettings) -> None:
    """Register the logger and the default registry."""
    from ..hashing.registry import get_registry
    from ..services.logging import DigestLogger

    def create_logger() -> ILogger:
        return DigestLogger(
            level=settings.logging.level,
            console_enabled=settings.logging.console,
            file_enabled=settings.logging.file,
        )

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]

    if settings.config_error:
        container.resolve(ILogger).warning("%s", settings.config_error)  # type: ignore[type-abstract]

    get_registry()


def reset() -> None:
    """
    Reset the application state.

    Drops the container, and with it the default registry and logger.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if digestkit has been bootstrapped."""
    return _initialized

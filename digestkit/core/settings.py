"""
Pydantic Settings for digestkit configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .di import get_logger
from .models.config import DigestConfig, LoggingConfig

CONFIG_DIR_NAME = ".digestkit"
CONFIG_FILE_NAME = "config.toml"


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .digestkit/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.digestkit] table is accepted as well.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "digestkit" in data.get("tool", {}):
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None
        self.config_file: str | None = None
        self.config_error: str | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            if path.name == "pyproject.toml":
                data = data.get("tool", {}).get("digestkit", {})

            self._data = data
            self.config_file = str(path)

        except tomllib.TOMLDecodeError as e:
            get_logger().warning("Failed to parse config file %s: %s", path, e)
            self.config_error = f"Failed to parse config file: {e}"
        except OSError as e:
            get_logger().warning("Failed to read config file %s: %s", path, e)
            self.config_error = f"Failed to read config file: {e}"

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class DigestSettings(BaseSettings):
    """digestkit configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (DIGESTKIT_<section>__<field>)
    3. TOML config file (.digestkit/config.toml or pyproject.toml [tool.digestkit])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "DIGESTKIT_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    logging: LoggingConfig = LoggingConfig()
    digest: DigestConfig = DigestConfig()

    # Internal fields (not from config)
    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        The TOML location cannot be passed through here, so load_settings()
        hands it over in module-level variables.
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> str | None:
        """Path of the TOML file the settings were read from, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Why the TOML file could not be used, if it could not."""
        return self._config_error

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-notation key (e.g., 'logging.level')."""
        obj: Any = self
        for part in key.split("."):
            if not hasattr(obj, part):
                return default
            obj = getattr(obj, part)
        return obj


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    **overrides: Any,
) -> DigestSettings:
    """Load digestkit settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit values, highest priority

    Returns:
        DigestSettings instance with all sources merged
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        settings = DigestSettings(**overrides)

        toml_source = TomlConfigSource(DigestSettings, config_path, start_dir)
        toml_source()
        settings._config_file = toml_source.config_file
        settings._config_error = toml_source.config_error

        return settings
    finally:
        _current_config_path = None
        _current_start_dir = None

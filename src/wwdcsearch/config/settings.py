"""wwdcsearch configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from wwdcsearch.exceptions import ConfigurationError
from wwdcsearch.models import Language

SUPPORTED_CONFIG_SUFFIXES = [".yml", ".yaml", ".toml", ".json"]


class WWDCSearchSettings(BaseSettings):
    """wwdcsearch configuration settings.

    Settings are loaded with the following precedence (highest to lowest):
    1. CLI arguments (when provided via command flags)
       Example: wwdcsearch search swiftui --limit 10

    2. Config file values (YAML, TOML, or JSON)
       Example: wwdcsearch search swiftui --config myconfig.yaml
       Multiple files: Later files override earlier ones

    3. Environment variables (prefixed with WWDCSEARCH_)
       Example: export WWDCSEARCH_CORPUS_PATH=/data/wwdc.json

    4. .env file (in current directory or specified path)
       Example: WWDCSEARCH_LOG_LEVEL=DEBUG in .env file

    5. Default values (defined in field declarations below)
    """

    model_config = SettingsConfigDict(
        env_prefix="WWDCSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Corpus settings
    corpus_path: Path | None = Field(
        default=None,
        description="Path to the JSON file holding the video corpus",
    )

    # Search settings
    search_default_language: Language = Field(
        default=Language.BOTH,
        description="Language mode used when a search does not name one",
    )
    search_default_limit: int = Field(
        default=100,
        description="Maximum number of results returned when no limit is given",
        ge=0,
    )
    highlight_class: str = Field(
        default="highlight",
        description="CSS class of the span wrapped around highlighted matches",
        pattern=r"^[\w-]+$",
    )

    # Debug settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(?i)(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(?i)(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("corpus_path", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand environment variables and ~ in path settings."""
        if v is None or v == "":
            return None
        if isinstance(v, str):
            expanded = os.path.expandvars(v)
            return Path(expanded).expanduser().resolve()
        if isinstance(v, Path):
            return v.expanduser().resolve()
        raise ValueError(
            f"Path fields must be str or Path, got {type(v).__name__}: {v!r}"
        )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.upper()
        raise ValueError(f"log_level must be a string, got {type(v).__name__}")

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: Any) -> str:
        """Normalize log format to lowercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.lower()
        raise ValueError(f"log_format must be a string, got {type(v).__name__}")

    @field_validator("search_default_language", mode="before")
    @classmethod
    def normalize_language(cls, v: Any) -> Any:
        """Accept language names in any casing."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @classmethod
    def _validated(cls, source: str, **data: Any) -> WWDCSearchSettings:
        """Build settings, reporting invalid values as ConfigurationError."""
        try:
            return cls(**data)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "settings"
            raise ConfigurationError(
                message=f"Invalid configuration value for '{field}'",
                hint=(
                    f"Fix '{field}' in {source} "
                    f"(environment variable WWDCSEARCH_{field.upper()})"
                ),
                details={
                    "field": field,
                    "reason": first["msg"],
                    "source": source,
                    "error_count": e.error_count(),
                },
            ) from e

    @classmethod
    def from_env(cls) -> WWDCSearchSettings:
        """Create settings from environment variables."""
        return cls._validated("environment")

    @classmethod
    def from_file(cls, config_path: Path | str) -> WWDCSearchSettings:
        """Load settings from a configuration file.

        Args:
            config_path: Path to configuration file (YAML, TOML, or JSON).

        Returns:
            Settings loaded from the file.

        Raises:
            ConfigurationError: If file format is not supported.
            FileNotFoundError: If config file doesn't exist.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()

        if suffix in {".yml", ".yaml"}:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        elif suffix == ".toml":
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        elif suffix == ".json":
            with config_path.open(encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigurationError(
                message=f"Unsupported configuration file format: {suffix}",
                hint="Use one of the supported formats: .yml, .yaml, .toml, or .json",
                details={
                    "file": str(config_path),
                    "detected_format": suffix,
                    "supported_formats": SUPPORTED_CONFIG_SUFFIXES,
                },
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                message="Configuration file must contain a mapping of settings",
                hint="Write settings as key/value pairs, e.g. 'log_level: DEBUG'",
                details={"file": str(config_path), "type": type(data).__name__},
            )

        return cls._validated(str(config_path), **data)

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: list[Path | str] | None = None,
        env_file: Path | str | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> WWDCSearchSettings:
        """Load settings with proper precedence from multiple sources.

        Precedence (highest to lowest):
        1. CLI arguments
        2. Config files (last file wins)
        3. Environment variables
        4. .env file
        5. Default values

        Args:
            config_files: List of config files to load (later files override earlier).
            env_file: Path to .env file (default: .env in current directory).
            cli_args: Dictionary of CLI arguments.

        Returns:
            Merged settings from all sources.
        """
        data: dict[str, Any] = {}

        if config_files:
            for config_file in config_files:
                try:
                    file_settings = cls.from_file(config_file)
                except FileNotFoundError:
                    from wwdcsearch.config.logging import get_logger as _get_logger

                    _get_logger("wwdcsearch.config.settings").warning(
                        "Configuration file not found, using defaults",
                        config_file=str(config_file),
                    )
                    continue
                # Only keys the file actually set, so env vars still apply
                data.update(file_settings.model_dump(exclude_unset=True))

        if env_file:
            settings = cls._validated(str(env_file), _env_file=env_file, **data)
        else:
            settings = cls._validated("environment", **data)

        if cli_args:
            cli_data = {k: v for k, v in cli_args.items() if v is not None}
            if cli_data:
                updated_data = settings.model_dump()
                updated_data.update(cli_data)
                settings = cls._validated("command line", **updated_data)

        return settings


# Global settings instance
_settings: WWDCSearchSettings | None = None


def _get_config_paths() -> list[Path | str]:
    """Get list of existing config files, in priority order (later wins)."""
    potential_paths = [
        Path.home() / ".config" / "wwdcsearch" / "config.yaml",
        Path.home() / ".config" / "wwdcsearch" / "config.json",
        Path.home() / ".config" / "wwdcsearch" / "config.toml",
        Path.cwd() / "wwdcsearch.yaml",
        Path.cwd() / "wwdcsearch.json",
        Path.cwd() / "wwdcsearch.toml",
    ]

    existing_paths: list[Path | str] = []
    for path in potential_paths:
        try:
            if path.is_file():
                existing_paths.append(path)
        except OSError:
            continue
    return existing_paths


def get_settings() -> WWDCSearchSettings:
    """Get the global settings instance.

    Loads configuration from config files in the user and project
    directories, then environment variables, then defaults.

    Returns:
        Global WWDCSearchSettings instance.
    """
    global _settings
    if _settings is None:
        config_paths = _get_config_paths()
        if config_paths:
            _settings = WWDCSearchSettings.from_multiple_sources(
                config_files=config_paths
            )
        else:
            _settings = WWDCSearchSettings.from_env()
    return _settings


def set_settings(settings: WWDCSearchSettings) -> None:
    """Set the global settings instance.

    Args:
        settings: Settings instance to use globally.
    """
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Clear the global settings cache.

    Forces get_settings() to re-read from environment variables and
    configuration files on the next call.
    """
    global _settings
    _settings = None


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> WWDCSearchSettings:
    """Get settings for CLI commands with consistent precedence.

    Args:
        config_file: Optional specific config file to load. If not provided,
                    uses standard config locations.
        cli_overrides: Dictionary of CLI argument overrides (e.g., corpus_path).
                      Only non-None values are applied.

    Returns:
        WWDCSearchSettings instance with all sources merged.

    Raises:
        ConfigurationError: If config_file is specified but doesn't exist,
            or any source holds an invalid value.
    """
    if config_file:
        if not config_file.exists():
            raise ConfigurationError(
                message=f"Config file not found: {config_file}",
                hint="Check the path given to --config",
                details={"file": str(config_file)},
            )
        return WWDCSearchSettings.from_multiple_sources(
            config_files=[config_file],
            cli_args=cli_overrides,
        )

    settings = get_settings()
    if cli_overrides:
        filtered_overrides = {k: v for k, v in cli_overrides.items() if v is not None}
        if filtered_overrides:
            data = settings.model_dump()
            data.update(filtered_overrides)
            settings = WWDCSearchSettings._validated("command line", **data)
    return settings

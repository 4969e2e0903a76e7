"""wwdcsearch configuration module."""

from __future__ import annotations

from typing import Any

from wwdcsearch.config.logging import configure_logging
from wwdcsearch.config.logging import get_logger as _get_logger
from wwdcsearch.config.settings import (
    WWDCSearchSettings,
    clear_settings_cache,
    get_settings,
    get_settings_for_cli,
    set_settings,
)
from wwdcsearch.exceptions import ConfigurationError

__all__ = [
    "WWDCSearchSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_logger",
    "get_settings",
    "get_settings_for_cli",
    "reset_settings",
    "set_settings",
]

# Initialize logging when the first logger is requested
_logging_initialized = False
_logger_cache: dict[str, Any] = {}


def _ensure_logging_configured() -> None:
    """Configure logging from the global settings once."""
    global _logging_initialized
    if not _logging_initialized:
        try:
            settings = get_settings()
        except ConfigurationError:
            # Log with defaults; the error resurfaces where settings are used
            settings = WWDCSearchSettings.model_construct()
        configure_logging(settings)
        _logging_initialized = True


def get_logger(name: str) -> Any:
    """Get a configured logger instance.

    Loggers are cached locally so hot code paths return without calling
    into structlog again.

    Args:
        name: Logger name (usually __name__).

    Returns:
        Configured structlog logger (cached after first use).
    """
    if name in _logger_cache:
        return _logger_cache[name]

    _ensure_logging_configured()

    logger = _get_logger(name)
    _logger_cache[name] = logger
    return logger


def reset_settings() -> None:
    """Reset settings and clear logger cache.

    Ensures a clean state for testing or reconfiguration.
    """
    global _logging_initialized
    clear_settings_cache()
    _logging_initialized = False
    _logger_cache.clear()

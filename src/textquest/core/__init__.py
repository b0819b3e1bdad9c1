"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        TextQuestError: Base exception for all library errors.
        GameEngineError: Entity and item engine errors.
        InvalidEntityStateError: Inconsistent entity construction.
        ConfigurationError: Configuration-related errors.
        ValidationError: Data validation errors.

    Configuration:
        Settings: Top-level settings class.
        GameSettings: Entity defaults and engine behaviour.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up structlog.
        get_logger: Get a logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from textquest.core.config import (
    GameSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from textquest.core.exceptions import (
    ConfigurationError,
    GameEngineError,
    InvalidEntityStateError,
    TextQuestError,
    ValidationError,
)
from textquest.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "TextQuestError",
    "GameEngineError",
    "InvalidEntityStateError",
    "ConfigurationError",
    "ValidationError",
    # Configuration
    "Settings",
    "GameSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]

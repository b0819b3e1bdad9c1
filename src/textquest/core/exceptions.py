"""Exception hierarchy for textquest.

Player input never raises: bad commands degrade into no-op or rejected
outcomes (see ``textquest.models.outcome``). The exceptions below cover
programmer and configuration mistakes, such as building an item with a
negative price or loading malformed settings. All of them inherit from
TextQuestError so callers can catch library errors in one place.

Example:
    >>> from textquest.core.exceptions import ValidationError
    >>> raise ValidationError("Quantity must be positive", field_name="quantity")
"""

from __future__ import annotations

from typing import Any


class TextQuestError(Exception):
    """Base exception for all textquest errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Game Engine Exceptions
# =============================================================================


class GameEngineError(TextQuestError):
    """Base exception for entity and item engine errors."""


class InvalidEntityStateError(GameEngineError):
    """Raised when an entity would be built in an inconsistent state.

    For example an outfit entry stored under a slot that does not match
    the equipment's own slot.
    """

    def __init__(
        self,
        message: str,
        *,
        entity_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the error with the offending entity's name.

        Args:
            message: Human-readable error description.
            entity_name: Name of the entity being built.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if entity_name:
            combined_details["entity_name"] = entity_name
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(TextQuestError):
    """Raised when library configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(TextQuestError):
    """Raised when item, command or entity data fails validation."""

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


__all__ = [
    "TextQuestError",
    "GameEngineError",
    "InvalidEntityStateError",
    "ConfigurationError",
    "ValidationError",
]

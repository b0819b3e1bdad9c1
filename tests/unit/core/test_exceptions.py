"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from textquest.core.exceptions import (
    ConfigurationError,
    GameEngineError,
    InvalidEntityStateError,
    TextQuestError,
    ValidationError,
)


class TestTextQuestError:
    """Tests for the base TextQuestError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = TextQuestError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = TextQuestError("Test error", details={"key": "value", "count": 42})
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(TextQuestError("Test", details={"x": 1}))
        assert "TextQuestError" in repr_str
        assert "x" in repr_str


class TestDomainExceptions:
    """Tests for domain-specific exceptions."""

    def test_invalid_entity_state_carries_name(self) -> None:
        """Test InvalidEntityStateError with entity name."""
        exc = InvalidEntityStateError("Bad outfit", entity_name="Hero")
        assert exc.details["entity_name"] == "Hero"
        assert isinstance(exc, GameEngineError)

    def test_configuration_error_key(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Bad value", config_key="default_max_hp")
        assert exc.details["config_key"] == "default_max_hp"

    def test_validation_error_fields(self) -> None:
        """Test ValidationError with field context."""
        exc = ValidationError("Too small", field_name="quantity", invalid_value=0)
        assert exc.details == {"field_name": "quantity", "invalid_value": 0}

    @pytest.mark.parametrize(
        "exc_class",
        [GameEngineError, InvalidEntityStateError, ConfigurationError, ValidationError],
    )
    def test_all_inherit_from_base(self, exc_class: type[TextQuestError]) -> None:
        """Test that every exception can be caught as TextQuestError."""
        with pytest.raises(TextQuestError):
            raise exc_class("boom")

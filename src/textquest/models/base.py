"""Shared helpers for building models."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from textquest.core.exceptions import ValidationError


ModelT = TypeVar("ModelT", bound=BaseModel)


def build_model(model: type[ModelT], **data: Any) -> ModelT:
    """Instantiate ``model``, reporting the first bad field as ValidationError.

    Raises:
        ValidationError: If pydantic rejects the data.
    """
    try:
        return model(**data)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field_name = ".".join(str(part) for part in first["loc"]) or None
        raise ValidationError(
            f"Invalid {model.__name__}: {first['msg']}",
            field_name=field_name,
            invalid_value=first.get("input"),
            details={"error_count": exc.error_count()},
        ) from exc


__all__ = ["build_model"]

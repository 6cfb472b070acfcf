"""Presence checks for request fields."""

from typing import Any, Iterable, List, Mapping

from crmpro.errors import ValidationError


def missing_fields(values: Mapping[str, Any], required: Iterable[str]) -> List[str]:
    """Return the required fields that are absent or empty."""
    return [name for name in required if not values.get(name)]


def require_fields(values: Mapping[str, Any], required: Iterable[str], message: str) -> None:
    """Raise ValidationError with ``message`` if any required field is missing."""
    missing = missing_fields(values, required)
    if missing:
        raise ValidationError(message)

"""Required-field presence checks for form submissions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .errors import ValidationError


def is_present(value: Any) -> bool:
    """A field counts as present unless it is absent, None, "", False or 0."""
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0
    return True


def missing_fields(submission: Mapping[str, Any], required: Sequence[str]) -> list[str]:
    """Return the required field names that are not present, in *required* order."""
    return [name for name in required if not is_present(submission.get(name))]


def validate(submission: Mapping[str, Any], required: Sequence[str]) -> None:
    """Raise :class:`ValidationError` if any required field is missing.

    No format checks are made (an ``email`` of ``"x"`` passes).
    """
    missing = missing_fields(submission, required)
    if missing:
        raise ValidationError(missing)

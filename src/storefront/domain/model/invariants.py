"""Invariant checks shared by the Product and Order aggregates.

Each check raises ValidationError with a message naming the offending
field; none of them coerce or correct the value they are given.
"""

from __future__ import annotations

import math

from storefront.domain.exceptions import ValidationError

MAX_NAME_LENGTH = 255


def check_name(value: object, label: str) -> None:
    """A name must be a non-blank string of at most 255 characters."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} cannot be empty")
    if len(value) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"{label} cannot exceed {MAX_NAME_LENGTH} characters"
        )


def check_amount(value: object, label: str) -> None:
    """An amount must be a finite, non-negative real number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{label} must be a valid number")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        # ints too large for a float
        finite = False
    if not finite:
        raise ValidationError(f"{label} must be a valid number")


def check_count(value: object, label: str) -> None:
    """A count must be a non-negative integral number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{label} must be an integer")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{label} must be an integer")

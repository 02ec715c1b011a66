from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from numbers import Real

from ..core.enums import AttendanceMark, PlacementStatus
from ..core.exceptions import ValidationError


def require_count(value: int, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer, got {value!r}")
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative, got {value}")
    return value


def require_present_within_total(present: int, total: int) -> None:
    if present > total:
        raise ValidationError(f"present ({present}) cannot exceed total ({total})")


def require_goal_percentage(value: Real) -> Fraction:
    """Validate a goal percentage and return it as an exact fraction.

    Accepts ints, floats, Decimals and Fractions in the closed range [0, 100].
    Floats are converted through their decimal text so ``72.5`` stays
    ``145/2`` rather than the nearest binary float.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise ValidationError(f"goal_percentage must be a number, got {value!r}")
    try:
        goal = Fraction(str(value))
    except ValueError:
        raise ValidationError(f"goal_percentage must be finite, got {value!r}") from None
    if goal < 0 or goal > 100:
        raise ValidationError(f"goal_percentage must be between 0 and 100, got {value}")
    return goal


def require_percentage(value: Real, field_name: str = "percentage") -> Fraction:
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise ValidationError(f"{field_name} must be a number, got {value!r}")
    try:
        return Fraction(str(value))
    except ValueError:
        raise ValidationError(f"{field_name} must be finite, got {value!r}") from None


def require_mark(value) -> AttendanceMark:
    try:
        return AttendanceMark(value)
    except ValueError:
        raise ValidationError(f"status must be one of present/absent/cancelled, got {value!r}") from None


def require_placement_status(value) -> PlacementStatus:
    try:
        return PlacementStatus(value)
    except ValueError:
        raise ValidationError(f"status must be one of pending/attended/missed, got {value!r}") from None

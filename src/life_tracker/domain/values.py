"""Coercion helpers applied at every write boundary."""

import math
from datetime import UTC, datetime

from life_tracker.domain.errors import ValidationError

_TRUE_STRINGS = {"1", "true", "yes", "on"}


def to_number(value: object, default: float = 0) -> float:
    """Coerce a loosely typed value to a finite number, or return the default."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return default
    else:
        return default
    if not math.isfinite(number):
        return default
    return int(number) if number.is_integer() else number


def to_optional_positive(value: object) -> float | None:
    """Coerce to a positive number; zero, negative and invalid input become None."""
    number = to_number(value, default=0)
    return number if number > 0 else None


def to_int(value: object, default: int = 0) -> int:
    """Coerce to an integer, truncating fractional input."""
    return int(to_number(value, default=default))


def to_bool(value: object) -> bool:
    """Coerce to a boolean, accepting common string spellings."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def utc_now() -> datetime:
    """Return the current instant as an aware UTC datetime."""
    return datetime.now(tz=UTC)


def format_timestamp(moment: datetime) -> str:
    """Format an instant as a UTC ISO-8601 string with a Z suffix."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = moment.astimezone(UTC).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def parse_timestamp(value: object) -> datetime:
    """Parse an ISO-8601 timestamp, raising ValidationError on bad input."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("A valid ISO-8601 timestamp is required")
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise ValidationError(f"Invalid timestamp: {value}") from exc

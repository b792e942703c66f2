"""Calendar-day bucketing.

Every day-scoped read and write goes through :func:`date_key_of` so that an
entry lands in the same ``YYYY-MM-DD`` bucket on both paths. Buckets use the
server's local timezone unless an explicit timezone is configured; they
are never computed in UTC.
"""

from datetime import date, datetime, tzinfo

from life_tracker.domain.errors import ValidationError
from life_tracker.domain.values import parse_timestamp

DATE_KEY_FORMAT = "%Y-%m-%d"


def date_key_of(timestamp: datetime | str, tz: tzinfo | None = None) -> str:
    """Return the local calendar-day key for an instant.

    Aware timestamps are converted into ``tz`` (or the system timezone when
    ``tz`` is None). Naive timestamps are taken to be local already.
    """
    moment = parse_timestamp(timestamp)
    if moment.tzinfo is not None:
        moment = moment.astimezone(tz)
    return moment.strftime(DATE_KEY_FORMAT)


def today(tz: tzinfo | None = None) -> str:
    """Return the day key for now."""
    now = datetime.now(tz=tz) if tz is not None else datetime.now()
    return now.strftime(DATE_KEY_FORMAT)


def parse_date_key(value: str) -> str:
    """Validate a caller-supplied ``YYYY-MM-DD`` key and return it normalized."""
    try:
        parsed = date.fromisoformat(value.strip())
    except (AttributeError, ValueError) as exc:
        raise ValidationError(f"Invalid date, expected YYYY-MM-DD: {value}") from exc
    return parsed.strftime(DATE_KEY_FORMAT)


def resolve_date_key(value: str | None, tz: tzinfo | None = None) -> str:
    """Return the validated key, falling back to today when none is given."""
    if not value:
        return today(tz)
    return parse_date_key(value)

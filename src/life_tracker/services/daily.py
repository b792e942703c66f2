"""Daily fasting window and water intake."""

from dataclasses import dataclass, replace
from datetime import tzinfo

from life_tracker.domain.dates import resolve_date_key
from life_tracker.domain.errors import ValidationError
from life_tracker.domain.food import DailyFoodRecord
from life_tracker.domain.values import to_bool, to_number
from life_tracker.services.ledger import LedgerRepository, find_index
from life_tracker.services.records import parse_daily_food, to_row

HOURS_PER_DAY = 24


@dataclass
class DailyFoodService:
    """Service for the one-record-per-day fasting and water state."""

    repository: LedgerRepository
    tz: tzinfo | None = None

    def get(self, day: str | None = None) -> DailyFoodRecord:
        """Return the stored record or the defaults; reading never persists."""
        target = resolve_date_key(day, self.tz)
        document = self.repository.load_all()
        index = find_index(document.items, "date", target)
        if index is None:
            return DailyFoodRecord(date=target)
        return parse_daily_food(document.items[index])

    def update(self, day: str | None, payload: dict[str, object]) -> DailyFoodRecord:
        """Update the fasting flag and eating window; water is left untouched."""
        target = resolve_date_key(day, self.tz)
        changes: dict[str, object] = {}
        if "fasting_done" in payload:
            changes["fasting_done"] = to_bool(payload["fasting_done"])
        for key in ("eating_start", "eating_end"):
            if key in payload:
                changes[key] = _hour(key, payload[key])

        with self.repository.lock():
            document = self.repository.load_all()
            index = _ensure_record(document.items, target)
            updated = replace(parse_daily_food(document.items[index]), **changes)
            document.items[index] = to_row(updated)
            self.repository.save_all(document.items, document.next_id)
        return updated

    def add_water(self, day: str | None, amount: object) -> DailyFoodRecord:
        """Add (or subtract, with a negative amount) water, clamping at zero."""
        number = to_number(amount) if amount is not None else 0
        if number != int(number):
            raise ValidationError("Water amount must be whole millilitres")
        delta = int(number)
        if delta == 0:
            raise ValidationError("Valid amount is required")
        target = resolve_date_key(day, self.tz)

        with self.repository.lock():
            document = self.repository.load_all()
            index = _ensure_record(document.items, target)
            current = parse_daily_food(document.items[index])
            updated = replace(current, water_ml=max(0, current.water_ml + delta))
            document.items[index] = to_row(updated)
            self.repository.save_all(document.items, document.next_id)
        return updated


def _ensure_record(items: list[dict[str, object]], day: str) -> int:
    """Return the index of the day's row, appending the defaults if needed."""
    index = find_index(items, "date", day)
    if index is None:
        items.append(to_row(DailyFoodRecord(date=day)))
        index = len(items) - 1
    return index


def _hour(key: str, value: object) -> int:
    number = to_number(value, default=-1)
    if number != int(number) or not 0 <= number < HOURS_PER_DAY:
        raise ValidationError(f"{key} must be an hour between 0 and 23")
    return int(number)

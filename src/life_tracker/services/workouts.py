"""Kettlebell and push-up sets, daily timers and their summaries."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, tzinfo
from typing import TypeVar

from life_tracker.domain.dates import resolve_date_key
from life_tracker.domain.errors import NotFoundError, ValidationError
from life_tracker.domain.values import (
    format_timestamp,
    parse_timestamp,
    to_bool,
    to_number,
    utc_now,
)
from life_tracker.domain.workouts import (
    DailyWorkoutRecord,
    KettlebellDaySummary,
    KettlebellEntry,
    PushUpDaySummary,
    PushUpEntry,
    WorkoutHistory,
    WorkoutSummary,
)
from life_tracker.services.aggregation import (
    kettlebell_day_summary,
    pushup_day_summary,
    workout_history,
    workout_summary,
)
from life_tracker.services.ledger import LedgerRepository, find_index
from life_tracker.services.records import (
    parse_daily_workout,
    parse_kettlebell,
    parse_pushup,
    to_row,
)

_logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT", KettlebellEntry, PushUpEntry)


@dataclass
class WorkoutService:
    """Application service for workout entries and timers."""

    kettlebell: LedgerRepository
    pushups: LedgerRepository
    daily: LedgerRepository
    tz: tzinfo | None = None
    clock: Callable[[], datetime] = field(default=utc_now)

    def list_kettlebell(self, day: str | None = None) -> list[KettlebellEntry]:
        """Return the day's kettlebell sets, newest first."""
        target = resolve_date_key(day, self.tz)
        return _newest_first(
            entry for entry in self._kettlebell_entries() if entry.date == target
        )

    def kettlebell_summary(self, day: str | None = None) -> KettlebellDaySummary:
        """Return kettlebell totals for a day."""
        target = resolve_date_key(day, self.tz)
        return kettlebell_day_summary(self._kettlebell_entries(), target)

    def create_kettlebell(self, payload: dict[str, object]) -> KettlebellEntry:
        """Record a kettlebell set under the given day (today by default)."""
        weight = _positive_number("Weight", payload.get("weight"))
        series = _positive_int("Series", payload.get("series"))
        reps = _positive_int("Reps", payload.get("reps"))
        day = resolve_date_key(_optional_str(payload.get("date")), self.tz)

        with self.kettlebell.lock():
            document = self.kettlebell.load_all()
            entry = KettlebellEntry(
                id=document.allocate_id(),
                date=day,
                weight=weight,
                series=series,
                reps=reps,
                single_handed=to_bool(payload.get("single_handed", False)),
                created_at=format_timestamp(self.clock()),
            )
            document.items.append(to_row(entry))
            self.kettlebell.save_all(document.items, document.next_id)
        _logger.info("Logged kettlebell set %s on %s", entry.id, entry.date)
        return entry

    def update_kettlebell(
        self, entry_id: int, payload: dict[str, object]
    ) -> KettlebellEntry:
        """Patch weight, series, reps or hand mode; the day never moves."""
        changes: dict[str, object] = {}
        if "weight" in payload:
            changes["weight"] = _positive_number("Weight", payload["weight"])
        if "series" in payload:
            changes["series"] = _positive_int("Series", payload["series"])
        if "reps" in payload:
            changes["reps"] = _positive_int("Reps", payload["reps"])
        if "single_handed" in payload:
            changes["single_handed"] = to_bool(payload["single_handed"])
        return _update_entry(self.kettlebell, entry_id, parse_kettlebell, changes)

    def delete_kettlebell(self, entry_id: int) -> None:
        """Remove a kettlebell set."""
        _delete_entry(self.kettlebell, entry_id)

    def list_pushups(self, day: str | None = None) -> list[PushUpEntry]:
        """Return the day's push-up sets, newest first."""
        target = resolve_date_key(day, self.tz)
        return _newest_first(
            entry for entry in self._pushup_entries() if entry.date == target
        )

    def pushup_summary(self, day: str | None = None) -> PushUpDaySummary:
        """Return push-up totals for a day."""
        target = resolve_date_key(day, self.tz)
        return pushup_day_summary(self._pushup_entries(), target)

    def create_pushups(self, payload: dict[str, object]) -> PushUpEntry:
        """Record a push-up set under the given day (today by default)."""
        series = _positive_int("Series", payload.get("series"))
        reps = _positive_int("Reps", payload.get("reps"))
        day = resolve_date_key(_optional_str(payload.get("date")), self.tz)

        with self.pushups.lock():
            document = self.pushups.load_all()
            entry = PushUpEntry(
                id=document.allocate_id(),
                date=day,
                series=series,
                reps=reps,
                created_at=format_timestamp(self.clock()),
            )
            document.items.append(to_row(entry))
            self.pushups.save_all(document.items, document.next_id)
        _logger.info("Logged push-up set %s on %s", entry.id, entry.date)
        return entry

    def update_pushups(self, entry_id: int, payload: dict[str, object]) -> PushUpEntry:
        """Patch series or reps; the day never moves."""
        changes: dict[str, object] = {}
        if "series" in payload:
            changes["series"] = _positive_int("Series", payload["series"])
        if "reps" in payload:
            changes["reps"] = _positive_int("Reps", payload["reps"])
        return _update_entry(self.pushups, entry_id, parse_pushup, changes)

    def delete_pushups(self, entry_id: int) -> None:
        """Remove a push-up set."""
        _delete_entry(self.pushups, entry_id)

    def get_daily(self, day: str | None = None) -> DailyWorkoutRecord:
        """Return the day's timers, zero when nothing was recorded."""
        target = resolve_date_key(day, self.tz)
        return self._daily_record(target) or DailyWorkoutRecord(date=target)

    def update_daily(
        self, day: str | None, payload: dict[str, object]
    ) -> DailyWorkoutRecord:
        """Overwrite timer values; they are cumulative on the client, not here."""
        target = resolve_date_key(day, self.tz)
        changes: dict[str, object] = {}
        for key in ("kettlebell_time", "pushup_time"):
            if key in payload:
                seconds = to_number(payload[key])
                if seconds < 0:
                    raise ValidationError(f"{key} must not be negative")
                changes[key] = seconds

        with self.daily.lock():
            document = self.daily.load_all()
            index = find_index(document.items, "date", target)
            if index is None:
                document.items.append(to_row(DailyWorkoutRecord(date=target)))
                index = len(document.items) - 1
            updated = replace(parse_daily_workout(document.items[index]), **changes)
            document.items[index] = to_row(updated)
            self.daily.save_all(document.items, document.next_id)
        return updated

    def history(self) -> WorkoutHistory:
        """Return all-time per-day totals for the heatmaps."""
        return workout_history(self._kettlebell_entries(), self._pushup_entries())

    def summary(self, day: str | None = None) -> WorkoutSummary:
        """Return the combined summary for a day."""
        target = resolve_date_key(day, self.tz)
        return workout_summary(
            self._kettlebell_entries(),
            self._pushup_entries(),
            self._daily_record(target),
            target,
        )

    def _kettlebell_entries(self) -> list[KettlebellEntry]:
        return [parse_kettlebell(row) for row in self.kettlebell.load_all().items]

    def _pushup_entries(self) -> list[PushUpEntry]:
        return [parse_pushup(row) for row in self.pushups.load_all().items]

    def _daily_record(self, day: str) -> DailyWorkoutRecord | None:
        document = self.daily.load_all()
        index = find_index(document.items, "date", day)
        if index is None:
            return None
        return parse_daily_workout(document.items[index])


def _update_entry(
    repository: LedgerRepository,
    entry_id: int,
    parse: Callable[[dict[str, object]], EntryT],
    changes: dict[str, object],
) -> EntryT:
    with repository.lock():
        document = repository.load_all()
        index = find_index(document.items, "id", entry_id)
        if index is None:
            raise NotFoundError("Entry not found")
        updated = replace(parse(document.items[index]), **changes)
        document.items[index] = {**document.items[index], **to_row(updated)}
        repository.save_all(document.items, document.next_id)
    return updated


def _delete_entry(repository: LedgerRepository, entry_id: int) -> None:
    with repository.lock():
        document = repository.load_all()
        index = find_index(document.items, "id", entry_id)
        if index is None:
            raise NotFoundError("Entry not found")
        del document.items[index]
        repository.save_all(document.items, document.next_id)


def _newest_first(entries: Iterable[EntryT]) -> list[EntryT]:
    return sorted(entries, key=_created_at_key, reverse=True)


def _created_at_key(entry: KettlebellEntry | PushUpEntry) -> datetime:
    try:
        moment = parse_timestamp(entry.created_at)
    except ValidationError:
        return datetime.min.replace(tzinfo=UTC)
    return moment if moment.tzinfo is not None else moment.astimezone()


def _positive_number(label: str, value: object) -> float:
    number = to_number(value)
    if number <= 0:
        raise ValidationError(f"{label} is required and must be positive")
    return number


def _positive_int(label: str, value: object) -> int:
    number = to_number(value)
    if number != int(number):
        raise ValidationError(f"{label} must be a whole number")
    if number <= 0:
        raise ValidationError(f"{label} is required and must be positive")
    return int(number)


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) and value.strip() else None

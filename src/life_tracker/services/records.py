"""Conversions between stored ledger rows and domain models."""

from dataclasses import asdict

from life_tracker.domain.food import (
    DEFAULT_EATING_END,
    DEFAULT_EATING_START,
    DailyFoodRecord,
    FoodItem,
    FoodLogEntry,
)
from life_tracker.domain.values import (
    to_bool,
    to_int,
    to_number,
    to_optional_positive,
)
from life_tracker.domain.workouts import (
    DailyWorkoutRecord,
    KettlebellEntry,
    PushUpEntry,
)


def parse_food(row: dict[str, object]) -> FoodItem:
    """Parse a stored food row."""
    return FoodItem(
        id=to_int(row.get("id")),
        name=str(row.get("name", "")),
        kcal=to_number(row.get("kcal")),
        protein=to_number(row.get("protein")),
        carbs=to_number(row.get("carbs")),
        fats=to_number(row.get("fats")),
        sodium=to_number(row.get("sodium")),
        caffeine=to_number(row.get("caffeine")),
        total_grams=to_optional_positive(row.get("total_grams")),
        created_at=str(row.get("created_at", "")),
    )


def parse_log(row: dict[str, object]) -> FoodLogEntry:
    """Parse a stored food log row."""
    return FoodLogEntry(
        id=to_int(row.get("id")),
        food_id=to_int(row.get("food_id")),
        servings=to_number(row.get("servings"), default=1),
        logged_at=str(row.get("logged_at", "")),
    )


def parse_daily_food(row: dict[str, object]) -> DailyFoodRecord:
    """Parse a stored fasting/water row."""
    return DailyFoodRecord(
        date=str(row.get("date", "")),
        fasting_done=to_bool(row.get("fasting_done", False)),
        eating_start=to_int(row.get("eating_start"), default=DEFAULT_EATING_START),
        eating_end=to_int(row.get("eating_end"), default=DEFAULT_EATING_END),
        water_ml=max(to_int(row.get("water_ml")), 0),
    )


def parse_kettlebell(row: dict[str, object]) -> KettlebellEntry:
    """Parse a stored kettlebell row."""
    return KettlebellEntry(
        id=to_int(row.get("id")),
        date=str(row.get("date", "")),
        weight=to_number(row.get("weight")),
        series=to_int(row.get("series")),
        reps=to_int(row.get("reps")),
        single_handed=to_bool(row.get("singleHanded", False)),
        created_at=str(row.get("created_at", "")),
    )


def serialize_kettlebell(entry: KettlebellEntry) -> dict[str, object]:
    """Render a kettlebell entry with its stored key names."""
    return {
        "id": entry.id,
        "date": entry.date,
        "weight": entry.weight,
        "series": entry.series,
        "reps": entry.reps,
        "singleHanded": entry.single_handed,
        "created_at": entry.created_at,
    }


def parse_pushup(row: dict[str, object]) -> PushUpEntry:
    """Parse a stored push-up row."""
    return PushUpEntry(
        id=to_int(row.get("id")),
        date=str(row.get("date", "")),
        series=to_int(row.get("series")),
        reps=to_int(row.get("reps")),
        created_at=str(row.get("created_at", "")),
    )


def parse_daily_workout(row: dict[str, object]) -> DailyWorkoutRecord:
    """Parse a stored timer row."""
    return DailyWorkoutRecord(
        date=str(row.get("date", "")),
        kettlebell_time=to_number(row.get("kettlebell_time")),
        pushup_time=to_number(row.get("pushup_time")),
    )


def to_row(record: object) -> dict[str, object]:
    """Render a domain dataclass as a storable row."""
    if isinstance(record, KettlebellEntry):
        return serialize_kettlebell(record)
    return asdict(record)  # type: ignore[call-overload]

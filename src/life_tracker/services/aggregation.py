"""Pure aggregation of dated entries into per-day and history summaries.

Nothing here performs I/O or raises on empty input: an empty scope folds to
a zero-valued summary. Rounding is a presentation concern applied by the
``present_*``/``round_*`` helpers only; summaries keep full precision.
"""

import math
from collections.abc import Iterable, Mapping
from datetime import tzinfo

from life_tracker.domain.dates import date_key_of
from life_tracker.domain.errors import ValidationError
from life_tracker.domain.food import DailyFoodSummary, FoodItem, FoodLogEntry
from life_tracker.domain.workouts import (
    DailyWorkoutRecord,
    KettlebellDaySummary,
    KettlebellDayTotals,
    KettlebellEntry,
    PushUpDaySummary,
    PushUpDayTotals,
    PushUpEntry,
    WorkoutHistory,
    WorkoutSummary,
)

SINGLE_HAND_MULTIPLIER = 1
DOUBLE_HAND_MULTIPLIER = 2


def kettlebell_volume(weight: float, reps: int, single_handed: bool) -> float:
    """Workload proxy: weight times total reps, doubled for two-handed swings."""
    multiplier = SINGLE_HAND_MULTIPLIER if single_handed else DOUBLE_HAND_MULTIPLIER
    return weight * reps * multiplier


def entry_reps(entry: KettlebellEntry | PushUpEntry) -> int:
    """Total reps across all series of an entry."""
    return entry.series * entry.reps


def entry_volume(entry: KettlebellEntry) -> float:
    """Volume of one kettlebell entry."""
    return kettlebell_volume(entry.weight, entry_reps(entry), entry.single_handed)


def kettlebell_day_summary(
    entries: Iterable[KettlebellEntry], day: str
) -> KettlebellDaySummary:
    """Sum reps and volume over entries stored under ``day``."""
    total_reps = 0
    total_volume: float = 0
    total_entries = 0
    for entry in entries:
        if entry.date != day:
            continue
        total_reps += entry_reps(entry)
        total_volume += entry_volume(entry)
        total_entries += 1
    return KettlebellDaySummary(
        total_reps=total_reps,
        total_volume=total_volume,
        total_entries=total_entries,
    )


def pushup_day_summary(entries: Iterable[PushUpEntry], day: str) -> PushUpDaySummary:
    """Sum reps over push-up entries stored under ``day``."""
    total_reps = 0
    total_entries = 0
    for entry in entries:
        if entry.date != day:
            continue
        total_reps += entry_reps(entry)
        total_entries += 1
    return PushUpDaySummary(total_reps=total_reps, total_entries=total_entries)


def log_date_key(log: FoodLogEntry, tz: tzinfo | None = None) -> str | None:
    """Bucket a food log by its ``logged_at`` timestamp; None when unparseable."""
    try:
        return date_key_of(log.logged_at, tz)
    except ValidationError:
        return None


def food_day_summary(
    logs: Iterable[FoodLogEntry],
    foods: Mapping[int, FoodItem],
    day: str,
    tz: tzinfo | None = None,
) -> DailyFoodSummary:
    """Sum per-serving nutrients times servings for logs bucketed to ``day``.

    A log whose food no longer exists adds nothing to the nutrient totals but
    still counts toward ``total_entries``.
    """
    totals = {
        "kcal": 0.0,
        "protein": 0.0,
        "carbs": 0.0,
        "fats": 0.0,
        "sodium": 0.0,
        "caffeine": 0.0,
    }
    total_entries = 0
    for log in logs:
        if log_date_key(log, tz) != day:
            continue
        food = foods.get(log.food_id)
        if food is not None:
            for field_name in totals:
                totals[field_name] += getattr(food, field_name) * log.servings
        total_entries += 1
    return DailyFoodSummary(
        total_kcal=totals["kcal"],
        total_protein=totals["protein"],
        total_carbs=totals["carbs"],
        total_fats=totals["fats"],
        total_sodium=totals["sodium"],
        total_caffeine=totals["caffeine"],
        total_entries=total_entries,
    )


def workout_summary(
    kettlebell: Iterable[KettlebellEntry],
    pushups: Iterable[PushUpEntry],
    daily: DailyWorkoutRecord | None,
    day: str,
) -> WorkoutSummary:
    """Combine both exercise summaries with the day's independently stored timers."""
    kb = kettlebell_day_summary(kettlebell, day)
    pu = pushup_day_summary(pushups, day)
    timers = daily or DailyWorkoutRecord(date=day)
    return WorkoutSummary(
        kettlebell_total_reps=kb.total_reps,
        kettlebell_total_volume=kb.total_volume,
        kettlebell_total_time=timers.kettlebell_time,
        kettlebell_entries=kb.total_entries,
        pushup_total_reps=pu.total_reps,
        pushup_total_time=timers.pushup_time,
        pushup_entries=pu.total_entries,
    )


def workout_history(
    kettlebell: Iterable[KettlebellEntry], pushups: Iterable[PushUpEntry]
) -> WorkoutHistory:
    """Group every entry by its stored ``date`` field in a single pass per domain."""
    kb_days: dict[str, KettlebellDayTotals] = {}
    for entry in kettlebell:
        current = kb_days.get(entry.date, KettlebellDayTotals())
        kb_days[entry.date] = KettlebellDayTotals(
            reps=current.reps + entry_reps(entry),
            volume=current.volume + entry_volume(entry),
        )

    pu_days: dict[str, PushUpDayTotals] = {}
    for entry in pushups:
        current_pu = pu_days.get(entry.date, PushUpDayTotals())
        pu_days[entry.date] = PushUpDayTotals(reps=current_pu.reps + entry_reps(entry))

    return WorkoutHistory(kettlebell=kb_days, pushups=pu_days)


def _round_half_up(value: float, digits: int = 0) -> float:
    scale = 10**digits
    rounded = math.floor(abs(value) * scale + 0.5) / scale
    return math.copysign(rounded, value) if rounded else 0


def round_kcal(value: float) -> int:
    """Calories display as whole units."""
    return int(_round_half_up(value))


def round_mg(value: float) -> int:
    """Milligram quantities display as whole units."""
    return int(_round_half_up(value))


def round_grams(value: float) -> float:
    """Gram quantities display with one decimal place."""
    return _round_half_up(value, 1)


def present_food_summary(summary: DailyFoodSummary) -> DailyFoodSummary:
    """Apply the display rounding policy to a daily summary."""
    return DailyFoodSummary(
        total_kcal=round_kcal(summary.total_kcal),
        total_protein=round_grams(summary.total_protein),
        total_carbs=round_grams(summary.total_carbs),
        total_fats=round_grams(summary.total_fats),
        total_sodium=round_mg(summary.total_sodium),
        total_caffeine=round_mg(summary.total_caffeine),
        total_entries=summary.total_entries,
    )

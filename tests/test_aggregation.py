"""Tests for day and history aggregation."""

from datetime import UTC, timedelta, timezone

from life_tracker.domain.food import DailyFoodSummary, FoodItem, FoodLogEntry
from life_tracker.domain.workouts import (
    DailyWorkoutRecord,
    KettlebellEntry,
    PushUpEntry,
)
from life_tracker.services.aggregation import (
    food_day_summary,
    kettlebell_day_summary,
    kettlebell_volume,
    present_food_summary,
    pushup_day_summary,
    round_grams,
    round_kcal,
    workout_history,
    workout_summary,
)


def _kb(entry_id: int, day: str, weight: float, series: int, reps: int, single: bool):
    return KettlebellEntry(
        id=entry_id,
        date=day,
        weight=weight,
        series=series,
        reps=reps,
        single_handed=single,
        created_at="2024-01-01T10:00:00.000Z",
    )


def _pu(entry_id: int, day: str, series: int, reps: int) -> PushUpEntry:
    return PushUpEntry(
        id=entry_id,
        date=day,
        series=series,
        reps=reps,
        created_at="2024-01-01T10:00:00.000Z",
    )


def _food(food_id: int, kcal: float, protein: float = 0) -> FoodItem:
    return FoodItem(
        id=food_id,
        name=f"Food {food_id}",
        kcal=kcal,
        protein=protein,
        carbs=0,
        fats=0,
        sodium=0,
        caffeine=0,
        total_grams=None,
        created_at="2024-01-01T00:00:00.000Z",
    )


def test_volume_doubles_for_two_handed_swings() -> None:
    assert kettlebell_volume(24, 10, single_handed=False) == 480
    assert kettlebell_volume(24, 10, single_handed=True) == 240


def test_kettlebell_day_summary_only_counts_the_day() -> None:
    entries = [
        _kb(1, "2024-01-01", 24, 3, 10, False),
        _kb(2, "2024-01-01", 16, 2, 15, True),
        _kb(3, "2024-01-02", 32, 5, 5, False),
    ]

    summary = kettlebell_day_summary(entries, "2024-01-01")

    assert summary.total_reps == 60
    assert summary.total_volume == 24 * 30 * 2 + 16 * 30
    assert summary.total_entries == 2


def test_empty_day_folds_to_zero() -> None:
    assert kettlebell_day_summary([], "2024-01-01").total_volume == 0
    assert pushup_day_summary([], "2024-01-01").total_entries == 0
    assert food_day_summary([], {}, "2024-01-01", UTC) == DailyFoodSummary()


def test_food_summary_multiplies_servings() -> None:
    foods = {1: _food(1, kcal=200, protein=10), 2: _food(2, kcal=50)}
    logs = [
        FoodLogEntry(id=1, food_id=1, servings=1.5, logged_at="2024-01-01T08:00:00Z"),
        FoodLogEntry(id=2, food_id=2, servings=2, logged_at="2024-01-01T12:00:00Z"),
        FoodLogEntry(id=3, food_id=1, servings=1, logged_at="2024-01-02T12:00:00Z"),
    ]

    summary = food_day_summary(logs, foods, "2024-01-01", UTC)

    assert summary.total_kcal == 400
    assert summary.total_protein == 15
    assert summary.total_entries == 2


def test_food_summary_buckets_by_local_day() -> None:
    pacific = timezone(timedelta(hours=-8))
    logs = [
        FoodLogEntry(id=1, food_id=1, servings=1, logged_at="2024-01-02T03:00:00Z"),
    ]

    summary = food_day_summary(logs, {1: _food(1, kcal=100)}, "2024-01-01", pacific)

    assert summary.total_kcal == 100


def test_dangling_food_counts_entry_without_nutrients() -> None:
    logs = [
        FoodLogEntry(id=1, food_id=99, servings=3, logged_at="2024-01-01T08:00:00Z"),
        FoodLogEntry(id=2, food_id=1, servings=1, logged_at="2024-01-01T09:00:00Z"),
        FoodLogEntry(id=3, food_id=1, servings=1, logged_at="not a timestamp"),
    ]

    summary = food_day_summary(logs, {1: _food(1, kcal=100)}, "2024-01-01", UTC)

    assert summary.total_kcal == 100
    assert summary.total_entries == 2


def test_workout_summary_merges_timers() -> None:
    summary = workout_summary(
        [_kb(1, "2024-01-01", 20, 1, 10, True)],
        [_pu(1, "2024-01-01", 3, 12), _pu(2, "2024-01-03", 1, 50)],
        DailyWorkoutRecord(date="2024-01-01", kettlebell_time=300, pushup_time=90),
        "2024-01-01",
    )

    assert summary.kettlebell_total_volume == 200
    assert summary.kettlebell_total_time == 300
    assert summary.pushup_total_reps == 36
    assert summary.pushup_entries == 1
    assert summary.pushup_total_time == 90


def test_workout_summary_without_timers() -> None:
    summary = workout_summary([], [], None, "2024-01-01")
    assert summary.kettlebell_total_time == 0
    assert summary.pushup_total_time == 0


def test_history_groups_by_stored_date() -> None:
    history = workout_history(
        [
            _kb(1, "2024-01-01", 24, 2, 10, False),
            _kb(2, "2024-01-01", 24, 1, 10, True),
            _kb(3, "2024-01-05", 12, 1, 10, True),
        ],
        [_pu(1, "2024-01-02", 2, 20)],
    )

    assert history.kettlebell["2024-01-01"].reps == 30
    assert history.kettlebell["2024-01-01"].volume == 24 * 20 * 2 + 24 * 10
    assert history.kettlebell["2024-01-05"].volume == 120
    assert history.pushups == {"2024-01-02": history.pushups["2024-01-02"]}
    assert history.pushups["2024-01-02"].reps == 40


def test_rounding_is_half_away_from_zero() -> None:
    assert round_kcal(2.5) == 3
    assert round_kcal(1249.5) == 1250
    assert round_grams(0.25) == 0.3
    assert round_grams(12.04) == 12.0


def test_present_food_summary_rounds_for_display() -> None:
    presented = present_food_summary(
        DailyFoodSummary(
            total_kcal=1234.56,
            total_protein=80.26,
            total_carbs=10.04,
            total_fats=3.35,
            total_sodium=799.5,
            total_caffeine=95.4,
            total_entries=4,
        )
    )

    assert presented.total_kcal == 1235
    assert presented.total_protein == 80.3
    assert presented.total_carbs == 10.0
    assert presented.total_sodium == 800
    assert presented.total_caffeine == 95
    assert presented.total_entries == 4

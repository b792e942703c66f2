"""Domain models for workout tracking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class KettlebellEntry:
    """A kettlebell swing set logged on a given day."""

    id: int
    date: str
    weight: float
    series: int
    reps: int
    single_handed: bool
    created_at: str


@dataclass(frozen=True)
class PushUpEntry:
    """A push-up set logged on a given day."""

    id: int
    date: str
    series: int
    reps: int
    created_at: str


@dataclass(frozen=True)
class DailyWorkoutRecord:
    """Timer state in seconds for one calendar day."""

    date: str
    kettlebell_time: float = 0
    pushup_time: float = 0


@dataclass(frozen=True)
class KettlebellDaySummary:
    """Kettlebell totals for one day."""

    total_reps: int = 0
    total_volume: float = 0
    total_entries: int = 0


@dataclass(frozen=True)
class PushUpDaySummary:
    """Push-up totals for one day."""

    total_reps: int = 0
    total_entries: int = 0


@dataclass(frozen=True)
class WorkoutSummary:
    """Combined workout totals for one day, including timer state."""

    kettlebell_total_reps: int = 0
    kettlebell_total_volume: float = 0
    kettlebell_total_time: float = 0
    kettlebell_entries: int = 0
    pushup_total_reps: int = 0
    pushup_total_time: float = 0
    pushup_entries: int = 0


@dataclass(frozen=True)
class KettlebellDayTotals:
    """Heatmap cell for kettlebell history."""

    reps: int = 0
    volume: float = 0


@dataclass(frozen=True)
class PushUpDayTotals:
    """Heatmap cell for push-up history."""

    reps: int = 0


@dataclass(frozen=True)
class WorkoutHistory:
    """All-time per-day totals keyed by date."""

    kettlebell: dict[str, KettlebellDayTotals]
    pushups: dict[str, PushUpDayTotals]

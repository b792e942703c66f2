"""Domain models for the food catalog, food logs and daily fasting data."""

from dataclasses import dataclass

NUTRIENT_FIELDS = ("kcal", "protein", "carbs", "fats", "sodium", "caffeine")

DEFAULT_EATING_START = 13
DEFAULT_EATING_END = 20
UNKNOWN_FOOD_NAME = "Unknown"


@dataclass(frozen=True)
class FoodItem:
    """A reusable catalog entry with per-serving nutrients."""

    id: int
    name: str
    kcal: float
    protein: float
    carbs: float
    fats: float
    sodium: float
    caffeine: float
    total_grams: float | None
    created_at: str


@dataclass(frozen=True)
class FoodLogEntry:
    """A stored log row; nutrients are joined from the catalog on read."""

    id: int
    food_id: int
    servings: float
    logged_at: str


@dataclass(frozen=True)
class FoodLogView:
    """A log row enriched with its food's per-serving values."""

    id: int
    food_id: int
    servings: float
    logged_at: str
    name: str
    kcal: float
    protein: float
    carbs: float
    fats: float
    sodium: float
    caffeine: float
    total_grams: float | None


@dataclass(frozen=True)
class DailyFoodRecord:
    """Fasting window and water intake for one calendar day."""

    date: str
    fasting_done: bool = False
    eating_start: int = DEFAULT_EATING_START
    eating_end: int = DEFAULT_EATING_END
    water_ml: int = 0


@dataclass(frozen=True)
class DailyFoodSummary:
    """Nutrient totals for one calendar day."""

    total_kcal: float = 0
    total_protein: float = 0
    total_carbs: float = 0
    total_fats: float = 0
    total_sodium: float = 0
    total_caffeine: float = 0
    total_entries: int = 0

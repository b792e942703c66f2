"""Shared test fixtures."""

import copy
import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from life_tracker.config import Settings
from life_tracker.containers import AppContainer
from life_tracker.services.catalog import FoodCatalogService
from life_tracker.services.daily import DailyFoodService
from life_tracker.services.food_logs import FoodLogService
from life_tracker.services.food_parsing import (
    FoodParserClient,
    FoodParsingService,
    MealSearchClient,
)
from life_tracker.services.ledger import LedgerDocument, LedgerRepository
from life_tracker.services.workouts import WorkoutService


@dataclass
class InMemoryLedgerRepository(LedgerRepository):
    """In-memory ledger document for tests."""

    items: list[dict[str, object]] = field(default_factory=list)
    next_id: int = 1
    initialized: bool = False
    saves: int = 0
    _lock: threading.RLock = field(default_factory=threading.RLock)

    def load_all(self) -> LedgerDocument:
        return LedgerDocument(
            items=copy.deepcopy(self.items),
            next_id=self.next_id,
            initialized=self.initialized,
        )

    def save_all(self, items: list[dict[str, object]], next_id: int) -> None:
        self.items = copy.deepcopy(items)
        self.next_id = next_id
        self.initialized = True
        self.saves += 1

    def lock(self) -> threading.RLock:
        return self._lock


@dataclass
class FixedClock:
    """Clock returning a controllable instant."""

    now: datetime = field(
        default_factory=lambda: datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@dataclass
class FakeFoodParserClient(FoodParserClient):
    """Fake LLM parser returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "name": "Protein bar",
            "kcal": 210,
            "protein": 20,
            "carbs": 22,
            "fats": 7,
            "sodium": 180,
            "caffeine": 0,
            "total_grams": 60,
        }
    )
    prompts: list[str] = field(default_factory=list)
    error: Exception | None = None

    async def extract(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeMealSearchClient(MealSearchClient):
    """Fake search provider with a canned answer."""

    content: str = "A chicken burrito has about 662-744 kcal and 40 g protein."
    citations: list[str] = field(
        default_factory=lambda: ["https://example.com/burrito"]
    )
    queries: list[str] = field(default_factory=list)
    error: Exception | None = None

    async def search(self, query: str) -> dict[str, object]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return {"content": self.content, "citations": self.citations}


@dataclass
class Ledgers:
    """Every collection used by the services."""

    foods: InMemoryLedgerRepository = field(default_factory=InMemoryLedgerRepository)
    logs: InMemoryLedgerRepository = field(default_factory=InMemoryLedgerRepository)
    daily_food: InMemoryLedgerRepository = field(
        default_factory=InMemoryLedgerRepository
    )
    kettlebell: InMemoryLedgerRepository = field(
        default_factory=InMemoryLedgerRepository
    )
    pushups: InMemoryLedgerRepository = field(default_factory=InMemoryLedgerRepository)
    daily_workout: InMemoryLedgerRepository = field(
        default_factory=InMemoryLedgerRepository
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(tracker_data_dir="data", api_prefix="/api")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def ledgers() -> Ledgers:
    return Ledgers()


@pytest.fixture
def catalog_service(ledgers: Ledgers, clock: FixedClock) -> FoodCatalogService:
    return FoodCatalogService(foods=ledgers.foods, logs=ledgers.logs, clock=clock)


@pytest.fixture
def food_log_service(ledgers: Ledgers, clock: FixedClock) -> FoodLogService:
    return FoodLogService(logs=ledgers.logs, foods=ledgers.foods, tz=UTC, clock=clock)


@pytest.fixture
def daily_food_service(ledgers: Ledgers) -> DailyFoodService:
    return DailyFoodService(ledgers.daily_food, tz=UTC)


@pytest.fixture
def workout_service(ledgers: Ledgers, clock: FixedClock) -> WorkoutService:
    return WorkoutService(
        kettlebell=ledgers.kettlebell,
        pushups=ledgers.pushups,
        daily=ledgers.daily_workout,
        tz=UTC,
        clock=clock,
    )


@pytest.fixture
def parser_client() -> FakeFoodParserClient:
    return FakeFoodParserClient()


@pytest.fixture
def search_client() -> FakeMealSearchClient:
    return FakeMealSearchClient()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    catalog_service: FoodCatalogService,
    food_log_service: FoodLogService,
    daily_food_service: DailyFoodService,
    workout_service: WorkoutService,
    parser_client: FakeFoodParserClient,
    search_client: FakeMealSearchClient,
) -> AppContainer:
    food_parsing_service = FoodParsingService(
        parser_client=parser_client,
        search_client=search_client,
        model=settings.openai_model,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog_service=catalog_service,
        food_log_service=food_log_service,
        daily_food_service=daily_food_service,
        workout_service=workout_service,
        food_parsing_service=food_parsing_service,
        backup_service=None,
        close_resources=close_resources,
    )

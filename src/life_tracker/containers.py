"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from life_tracker.adapters.json_ledger_repository import JsonLedgerRepository
from life_tracker.adapters.openai_food_parser_client import OpenAIFoodParserClient
from life_tracker.adapters.perplexity_client import HttpxPerplexityClient
from life_tracker.config import Settings
from life_tracker.services.backup import BackupService
from life_tracker.services.catalog import FoodCatalogService
from life_tracker.services.daily import DailyFoodService
from life_tracker.services.food_logs import FoodLogService
from life_tracker.services.food_parsing import FoodParsingService
from life_tracker.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: FoodCatalogService
    food_log_service: FoodLogService
    daily_food_service: DailyFoodService
    workout_service: WorkoutService
    food_parsing_service: FoodParsingService
    backup_service: BackupService | None
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    tz = resolved_settings.timezone
    food_dir = resolved_settings.food_dir
    workout_dir = resolved_settings.workout_dir

    foods = JsonLedgerRepository(food_dir / "foods.json")
    food_logs = JsonLedgerRepository(food_dir / "food-logs.json")
    daily_food = JsonLedgerRepository(food_dir / "daily.json")
    kettlebell = JsonLedgerRepository(workout_dir / "kettlebell.json")
    pushups = JsonLedgerRepository(workout_dir / "pushups.json")
    daily_workout = JsonLedgerRepository(workout_dir / "workout-daily.json")

    parser_client = (
        OpenAIFoodParserClient.create(resolved_settings.openai_api_key)
        if resolved_settings.openai_api_key
        else None
    )
    search_client = (
        HttpxPerplexityClient.create(
            api_key=resolved_settings.perplexity_api_key,
            base_url=resolved_settings.perplexity_base_url,
            model=resolved_settings.perplexity_model,
        )
        if resolved_settings.perplexity_api_key
        else None
    )
    backup_service = (
        BackupService(
            sources={"food": food_dir, "workout": workout_dir},
            backup_dir=resolved_settings.backup_dir,
            max_backups=resolved_settings.max_backups,
        )
        if resolved_settings.backup_dir
        else None
    )

    async def close_resources() -> None:
        if parser_client is not None:
            await parser_client.close()
        if search_client is not None:
            await search_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog_service=FoodCatalogService(foods=foods, logs=food_logs),
        food_log_service=FoodLogService(logs=food_logs, foods=foods, tz=tz),
        daily_food_service=DailyFoodService(daily_food, tz=tz),
        workout_service=WorkoutService(
            kettlebell=kettlebell,
            pushups=pushups,
            daily=daily_workout,
            tz=tz,
        ),
        food_parsing_service=FoodParsingService(
            parser_client=parser_client,
            search_client=search_client,
            model=resolved_settings.openai_model,
            reasoning_effort=resolved_settings.openai_reasoning_effort,
            store=resolved_settings.openai_store,
        ),
        backup_service=backup_service,
        close_resources=close_resources,
    )

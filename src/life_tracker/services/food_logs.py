"""Food log entries, their joined views and daily nutrient summaries."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import datetime, tzinfo

from life_tracker.domain.dates import resolve_date_key
from life_tracker.domain.errors import NotFoundError, ValidationError
from life_tracker.domain.food import (
    UNKNOWN_FOOD_NAME,
    DailyFoodSummary,
    FoodItem,
    FoodLogEntry,
    FoodLogView,
)
from life_tracker.domain.values import (
    format_timestamp,
    parse_timestamp,
    to_int,
    to_number,
    utc_now,
)
from life_tracker.services.aggregation import (
    food_day_summary,
    log_date_key,
    present_food_summary,
)
from life_tracker.services.ledger import LedgerRepository, find_index
from life_tracker.services.records import parse_food, parse_log, to_row

_logger = logging.getLogger(__name__)


@dataclass
class FoodLogService:
    """Service for logging catalog foods and summarizing a day's intake."""

    logs: LedgerRepository
    foods: LedgerRepository
    tz: tzinfo | None = None
    clock: Callable[[], datetime] = field(default=utc_now)

    def list_logs(self, day: str | None = None) -> list[FoodLogView]:
        """Return the day's logs joined with their foods, most recent first."""
        target = resolve_date_key(day, self.tz)
        foods = self._food_map()
        entries = [
            log for log in self._load_logs() if log_date_key(log, self.tz) == target
        ]
        entries.sort(key=_logged_at_key, reverse=True)
        return [join_log(log, foods.get(log.food_id)) for log in entries]

    def summary(
        self, day: str | None = None, rounded: bool = False
    ) -> DailyFoodSummary:
        """Return nutrient totals for a day, optionally rounded for display."""
        target = resolve_date_key(day, self.tz)
        totals = food_day_summary(self._load_logs(), self._food_map(), target, self.tz)
        return present_food_summary(totals) if rounded else totals

    def create_log(self, payload: dict[str, object]) -> FoodLogView:
        """Log servings of an existing catalog food at the current time."""
        food_id = to_int(payload.get("food_id"))
        if food_id <= 0:
            raise ValidationError("food_id is required")
        food = self._food_map().get(food_id)
        if food is None:
            raise NotFoundError("Food not found")
        servings = _servings(payload.get("servings"), default=1)

        with self.logs.lock():
            document = self.logs.load_all()
            log = FoodLogEntry(
                id=document.allocate_id(),
                food_id=food_id,
                servings=servings,
                logged_at=format_timestamp(self.clock()),
            )
            document.items.append(to_row(log))
            self.logs.save_all(document.items, document.next_id)
        _logger.info("Logged %s serving(s) of food %s", servings, food_id)
        return join_log(log, food)

    def update_log(self, log_id: int, payload: dict[str, object]) -> FoodLogView:
        """Change the servings and/or the logged time of an entry."""
        changes: dict[str, object] = {}
        if "servings" in payload:
            changes["servings"] = _servings(payload["servings"], default=0)
        if "logged_at" in payload:
            parse_timestamp(payload["logged_at"])
            changes["logged_at"] = str(payload["logged_at"]).strip()

        with self.logs.lock():
            document = self.logs.load_all()
            index = find_index(document.items, "id", log_id)
            if index is None:
                raise NotFoundError("Log entry not found")
            updated = replace(parse_log(document.items[index]), **changes)
            document.items[index] = {**document.items[index], **to_row(updated)}
            self.logs.save_all(document.items, document.next_id)
        return join_log(updated, self._food_map().get(updated.food_id))

    def delete_log(self, log_id: int) -> None:
        """Remove a single log entry."""
        with self.logs.lock():
            document = self.logs.load_all()
            index = find_index(document.items, "id", log_id)
            if index is None:
                raise NotFoundError("Log entry not found")
            del document.items[index]
            self.logs.save_all(document.items, document.next_id)

    def _load_logs(self) -> list[FoodLogEntry]:
        return [parse_log(row) for row in self.logs.load_all().items]

    def _food_map(self) -> dict[int, FoodItem]:
        foods = (parse_food(row) for row in self.foods.load_all().items)
        return {food.id: food for food in foods}


def join_log(log: FoodLogEntry, food: FoodItem | None) -> FoodLogView:
    """Denormalize a log with its food; a missing food yields the Unknown sentinel."""
    if food is None:
        return FoodLogView(
            id=log.id,
            food_id=log.food_id,
            servings=log.servings,
            logged_at=log.logged_at,
            name=UNKNOWN_FOOD_NAME,
            kcal=0,
            protein=0,
            carbs=0,
            fats=0,
            sodium=0,
            caffeine=0,
            total_grams=None,
        )
    return FoodLogView(
        id=log.id,
        food_id=log.food_id,
        servings=log.servings,
        logged_at=log.logged_at,
        name=food.name,
        kcal=food.kcal,
        protein=food.protein,
        carbs=food.carbs,
        fats=food.fats,
        sodium=food.sodium,
        caffeine=food.caffeine,
        total_grams=food.total_grams,
    )


def _servings(value: object, default: float) -> float:
    servings = to_number(value, default=default) if value is not None else default
    if servings <= 0:
        raise ValidationError("Servings must be a positive number")
    return servings


def _logged_at_key(log: FoodLogEntry) -> datetime:
    moment = parse_timestamp(log.logged_at)
    return moment if moment.tzinfo is not None else moment.astimezone()

"""Food catalog management."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import datetime

from life_tracker.domain.errors import ConflictError, NotFoundError, ValidationError
from life_tracker.domain.food import NUTRIENT_FIELDS, FoodItem
from life_tracker.domain.values import (
    format_timestamp,
    to_number,
    to_optional_positive,
    utc_now,
)
from life_tracker.services.ledger import LedgerRepository, find_index
from life_tracker.services.records import parse_food, parse_log, to_row

_logger = logging.getLogger(__name__)


@dataclass
class FoodCatalogService:
    """Application service for the reusable food catalog."""

    foods: LedgerRepository
    logs: LedgerRepository
    clock: Callable[[], datetime] = field(default=utc_now)

    def list_foods(self, search: str | None = None) -> list[FoodItem]:
        """Return catalog items, optionally filtered by a name substring."""
        items = [parse_food(row) for row in self.foods.load_all().items]
        if search:
            needle = search.lower()
            items = [food for food in items if needle in food.name.lower()]
        return sort_by_name(items)

    def get_food(self, food_id: int) -> FoodItem:
        """Return a single catalog item."""
        document = self.foods.load_all()
        index = find_index(document.items, "id", food_id)
        if index is None:
            raise NotFoundError("Food not found")
        return parse_food(document.items[index])

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Create a catalog item; names must be unique ignoring case."""
        name = _require_name(payload.get("name"))
        with self.foods.lock():
            document = self.foods.load_all()
            if _find_by_name(document.items, name) is not None:
                raise ConflictError("A food with this name already exists")
            food = FoodItem(
                id=document.allocate_id(),
                name=name,
                total_grams=to_optional_positive(payload.get("total_grams")),
                created_at=format_timestamp(self.clock()),
                **{key: _nutrient(payload.get(key)) for key in NUTRIENT_FIELDS},
            )
            document.items.append(to_row(food))
            self.foods.save_all(document.items, document.next_id)
        _logger.info("Created food %s (%s)", food.id, food.name)
        return food

    def update_food(self, food_id: int, payload: dict[str, object]) -> FoodItem:
        """Apply a partial update; absent fields keep their stored values."""
        with self.foods.lock():
            document = self.foods.load_all()
            index = find_index(document.items, "id", food_id)
            if index is None:
                raise NotFoundError("Food not found")
            existing = parse_food(document.items[index])

            changes: dict[str, object] = {}
            if "name" in payload:
                name = _require_name(payload["name"])
                duplicate = _find_by_name(document.items, name)
                if duplicate is not None and duplicate != index:
                    raise ConflictError("A food with this name already exists")
                changes["name"] = name
            for key in NUTRIENT_FIELDS:
                if key in payload:
                    changes[key] = _nutrient(payload[key])
            if "total_grams" in payload:
                changes["total_grams"] = to_optional_positive(payload["total_grams"])

            updated = replace(existing, **changes)
            document.items[index] = {**document.items[index], **to_row(updated)}
            self.foods.save_all(document.items, document.next_id)
        return updated

    def delete_food(self, food_id: int) -> int:
        """Delete a food and every log entry referencing it.

        Returns the number of cascaded log entries. The two documents are
        written one after the other without a cross-file transaction.
        """
        with self.foods.lock():
            document = self.foods.load_all()
            index = find_index(document.items, "id", food_id)
            if index is None:
                raise NotFoundError("Food not found")
            del document.items[index]
            self.foods.save_all(document.items, document.next_id)

        with self.logs.lock():
            log_document = self.logs.load_all()
            kept = [
                row for row in log_document.items if parse_log(row).food_id != food_id
            ]
            removed = len(log_document.items) - len(kept)
            if removed:
                self.logs.save_all(kept, log_document.next_id)
        _logger.info("Deleted food %s and %s log entries", food_id, removed)
        return removed


def sort_by_name(foods: list[FoodItem]) -> list[FoodItem]:
    """Locale-style order: case-insensitive, lowercase first between case variants."""
    return sorted(foods, key=lambda food: (food.name.casefold(), food.name.swapcase()))


def normalize_name(name: str) -> str:
    """Key used for name uniqueness."""
    return name.strip().casefold()


def _require_name(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Food name is required")
    return value.strip()


def _find_by_name(items: list[dict[str, object]], name: str) -> int | None:
    key = normalize_name(name)
    for index, row in enumerate(items):
        if normalize_name(str(row.get("name", ""))) == key:
            return index
    return None


def _nutrient(value: object) -> float:
    return max(to_number(value), 0)

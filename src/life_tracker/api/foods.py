"""Food catalog, food log and daily fasting endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status

from life_tracker.api.schemas import (
    DailyFoodUpdateRequest,
    FoodCreateRequest,
    FoodLogCreateRequest,
    FoodLogUpdateRequest,
    FoodParseRequest,
    FoodUpdateRequest,
    MealLookupRequest,
    WaterRequest,
    patch,
)

if TYPE_CHECKING:
    from life_tracker.containers import AppContainer

router = APIRouter(tags=["food"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/foods")
def list_foods(request: Request, search: str | None = None) -> list[dict[str, object]]:
    """Return the catalog sorted by name."""
    foods = _container(request).catalog_service.list_foods(search)
    return [asdict(food) for food in foods]


@router.get("/foods/{food_id}")
def get_food(food_id: int, request: Request) -> dict[str, object]:
    """Return a single catalog item."""
    return asdict(_container(request).catalog_service.get_food(food_id))


@router.post("/foods", status_code=status.HTTP_201_CREATED)
def create_food(body: FoodCreateRequest, request: Request) -> dict[str, object]:
    """Create a catalog item; duplicate names are rejected with 409."""
    food = _container(request).catalog_service.create_food(body.model_dump())
    return asdict(food)


@router.put("/foods/{food_id}")
def update_food(
    food_id: int, body: FoodUpdateRequest, request: Request
) -> dict[str, object]:
    """Patch a catalog item; omitted fields keep their values."""
    food = _container(request).catalog_service.update_food(food_id, patch(body))
    return asdict(food)


@router.delete("/foods/{food_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_food(food_id: int, request: Request) -> Response:
    """Delete a food and cascade to its log entries."""
    _container(request).catalog_service.delete_food(food_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/foods/parse")
async def parse_food(body: FoodParseRequest, request: Request) -> dict[str, object]:
    """Extract nutrition facts from free text with the configured LLM."""
    parsed = await _container(request).food_parsing_service.parse_text(body.text or "")
    return {"parsed": parsed.model_dump()}


@router.post("/foods/meal-lookup")
async def meal_lookup(body: MealLookupRequest, request: Request) -> dict[str, object]:
    """Look up nutrition facts for a described meal."""
    result = await _container(request).food_parsing_service.lookup_meal(
        body.description or ""
    )
    return result.model_dump()


@router.get("/logs")
def list_logs(request: Request, date: str | None = None) -> list[dict[str, object]]:
    """Return the day's log entries joined with their foods."""
    logs = _container(request).food_log_service.list_logs(date)
    return [asdict(log) for log in logs]


@router.get("/logs/summary")
def logs_summary(
    request: Request, date: str | None = None, rounded: bool = False
) -> dict[str, object]:
    """Return nutrient totals for a day, optionally rounded."""
    summary = _container(request).food_log_service.summary(date, rounded=rounded)
    return asdict(summary)


@router.post("/logs", status_code=status.HTTP_201_CREATED)
def create_log(body: FoodLogCreateRequest, request: Request) -> dict[str, object]:
    """Log servings of a catalog food at the current time."""
    return asdict(_container(request).food_log_service.create_log(patch(body)))


@router.put("/logs/{log_id}")
def update_log(
    log_id: int, body: FoodLogUpdateRequest, request: Request
) -> dict[str, object]:
    """Change the servings or logged time of an entry."""
    return asdict(_container(request).food_log_service.update_log(log_id, patch(body)))


@router.delete("/logs/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_log(log_id: int, request: Request) -> Response:
    """Remove a single log entry."""
    _container(request).food_log_service.delete_log(log_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/daily")
def get_daily(request: Request, date: str | None = None) -> dict[str, object]:
    """Return the fasting window and water state for a day."""
    return asdict(_container(request).daily_food_service.get(date))


@router.put("/daily")
def update_daily(
    body: DailyFoodUpdateRequest, request: Request, date: str | None = None
) -> dict[str, object]:
    """Update the day's record; provided fields overwrite."""
    record = _container(request).daily_food_service.update(date, patch(body))
    return asdict(record)


@router.post("/daily/water")
def add_water(
    body: WaterRequest, request: Request, date: str | None = None
) -> dict[str, object]:
    """Add or subtract water for a day, never below zero."""
    record = _container(request).daily_food_service.add_water(date, body.amount)
    return asdict(record)

"""Workout endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status

from life_tracker.api.schemas import (
    KettlebellCreateRequest,
    KettlebellUpdateRequest,
    PushUpCreateRequest,
    PushUpUpdateRequest,
    WorkoutDailyUpdateRequest,
    patch,
)
from life_tracker.services.records import serialize_kettlebell

if TYPE_CHECKING:
    from life_tracker.containers import AppContainer
    from life_tracker.services.workouts import WorkoutService

router = APIRouter(prefix="/workouts", tags=["workouts"])


def _workouts(request: Request) -> WorkoutService:
    container: AppContainer = request.app.state.container
    return container.workout_service


@router.get("/kettlebell")
def list_kettlebell(
    request: Request, date: str | None = None
) -> list[dict[str, object]]:
    """Return the day's kettlebell sets, newest first."""
    entries = _workouts(request).list_kettlebell(date)
    return [serialize_kettlebell(entry) for entry in entries]


@router.get("/kettlebell/summary")
def kettlebell_summary(request: Request, date: str | None = None) -> dict[str, object]:
    """Return the day's kettlebell totals."""
    return asdict(_workouts(request).kettlebell_summary(date))


@router.post("/kettlebell", status_code=status.HTTP_201_CREATED)
def create_kettlebell(
    body: KettlebellCreateRequest, request: Request
) -> dict[str, object]:
    """Record a kettlebell set."""
    entry = _workouts(request).create_kettlebell(body.model_dump())
    return serialize_kettlebell(entry)


@router.put("/kettlebell/{entry_id}")
def update_kettlebell(
    entry_id: int, body: KettlebellUpdateRequest, request: Request
) -> dict[str, object]:
    """Patch a kettlebell set; its day never changes."""
    entry = _workouts(request).update_kettlebell(entry_id, patch(body))
    return serialize_kettlebell(entry)


@router.delete("/kettlebell/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_kettlebell(entry_id: int, request: Request) -> Response:
    """Remove a kettlebell set."""
    _workouts(request).delete_kettlebell(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/pushups")
def list_pushups(request: Request, date: str | None = None) -> list[dict[str, object]]:
    """Return the day's push-up sets, newest first."""
    return [asdict(entry) for entry in _workouts(request).list_pushups(date)]


@router.get("/pushups/summary")
def pushup_summary(request: Request, date: str | None = None) -> dict[str, object]:
    """Return the day's push-up totals."""
    return asdict(_workouts(request).pushup_summary(date))


@router.post("/pushups", status_code=status.HTTP_201_CREATED)
def create_pushups(body: PushUpCreateRequest, request: Request) -> dict[str, object]:
    """Record a push-up set."""
    return asdict(_workouts(request).create_pushups(body.model_dump()))


@router.put("/pushups/{entry_id}")
def update_pushups(
    entry_id: int, body: PushUpUpdateRequest, request: Request
) -> dict[str, object]:
    """Patch a push-up set; its day never changes."""
    return asdict(_workouts(request).update_pushups(entry_id, patch(body)))


@router.delete("/pushups/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pushups(entry_id: int, request: Request) -> Response:
    """Remove a push-up set."""
    _workouts(request).delete_pushups(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/daily")
def get_daily(request: Request, date: str | None = None) -> dict[str, object]:
    """Return the day's timer seconds."""
    return asdict(_workouts(request).get_daily(date))


@router.put("/daily")
def update_daily(
    body: WorkoutDailyUpdateRequest, request: Request, date: str | None = None
) -> dict[str, object]:
    """Overwrite the day's timer seconds."""
    return asdict(_workouts(request).update_daily(date, patch(body)))


@router.get("/history")
def history(request: Request) -> dict[str, object]:
    """Return all-time per-day totals for the heatmaps."""
    return asdict(_workouts(request).history())


@router.get("/summary")
def summary(request: Request, date: str | None = None) -> dict[str, object]:
    """Return the combined workout summary for a day."""
    return asdict(_workouts(request).summary(date))

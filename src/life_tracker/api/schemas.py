"""Request bodies for the REST API.

Fields accept loose input: every value is coerced by the services at the
write boundary, and patch bodies are forwarded with ``exclude_unset`` so an
absent field keeps the stored value.
"""

from pydantic import BaseModel, ConfigDict, Field

Number = float | str | None
Flag = bool | str | int | None


class FoodCreateRequest(BaseModel):
    """Catalog item to create."""

    name: str | None = None
    kcal: Number = 0
    protein: Number = 0
    carbs: Number = 0
    fats: Number = 0
    sodium: Number = 0
    caffeine: Number = 0
    total_grams: Number = None


class FoodUpdateRequest(BaseModel):
    """Partial catalog item update."""

    name: str | None = None
    kcal: Number = None
    protein: Number = None
    carbs: Number = None
    fats: Number = None
    sodium: Number = None
    caffeine: Number = None
    total_grams: Number = None


class FoodLogCreateRequest(BaseModel):
    food_id: int | str | None = None
    servings: Number = None


class FoodLogUpdateRequest(BaseModel):
    servings: Number = None
    logged_at: str | None = None


class DailyFoodUpdateRequest(BaseModel):
    fasting_done: Flag = None
    eating_start: Number = None
    eating_end: Number = None


class WaterRequest(BaseModel):
    """Water delta in millilitres; negative values subtract."""

    amount: Number = None


class KettlebellCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    weight: Number = None
    series: Number = None
    reps: Number = None
    single_handed: Flag = Field(default=False, alias="singleHanded")
    date: str | None = None


class KettlebellUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    weight: Number = None
    series: Number = None
    reps: Number = None
    single_handed: Flag = Field(default=None, alias="singleHanded")


class PushUpCreateRequest(BaseModel):
    series: Number = None
    reps: Number = None
    date: str | None = None


class PushUpUpdateRequest(BaseModel):
    series: Number = None
    reps: Number = None


class WorkoutDailyUpdateRequest(BaseModel):
    """Timer values in seconds; each provided value overwrites the stored one."""

    kettlebell_time: Number = None
    pushup_time: Number = None


class FoodParseRequest(BaseModel):
    text: str | None = None


class MealLookupRequest(BaseModel):
    description: str | None = None


def patch(body: BaseModel) -> dict[str, object]:
    """Return only the fields the client actually sent."""
    return body.model_dump(exclude_unset=True)

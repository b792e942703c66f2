"""Models for AI-assisted food parsing results."""

from pydantic import BaseModel, Field, field_validator

from life_tracker.domain.values import to_number, to_optional_positive


class ParsedFood(BaseModel):
    """Nutrition facts extracted from free text, ready to prefill the catalog form."""

    name: str = "Unknown Food"
    kcal: float = Field(default=0, ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fats: float = Field(default=0, ge=0)
    sodium: float = Field(default=0, ge=0)
    caffeine: float = Field(default=0, ge=0)
    total_grams: float | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: object) -> str:
        text = str(value).strip() if value is not None else ""
        return text or "Unknown Food"

    @field_validator(
        "kcal", "protein", "carbs", "fats", "sodium", "caffeine", mode="before"
    )
    @classmethod
    def _coerce_amount(cls, value: object) -> float:
        """LLMs return strings like "~350" or negative noise; keep what is usable."""
        if isinstance(value, str):
            value = value.replace("~", "").strip()
        return max(to_number(value), 0)

    @field_validator("total_grams", mode="before")
    @classmethod
    def _coerce_total_grams(cls, value: object) -> float | None:
        return to_optional_positive(value)


class MealLookupResult(BaseModel):
    """Parsed nutrition for a meal description plus the search provider's answer."""

    parsed: ParsedFood
    raw_response: str = ""
    sources: list[str] = Field(default_factory=list)

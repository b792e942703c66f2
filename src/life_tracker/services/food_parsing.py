"""AI-assisted extraction of nutrition facts from free text."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError as PydanticValidationError

from life_tracker.domain.errors import (
    UpstreamError,
    UpstreamUnavailable,
    ValidationError,
)
from life_tracker.domain.parsing import MealLookupResult, ParsedFood

_logger = logging.getLogger(__name__)

FOOD_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "kcal": {"type": "number"},
        "protein": {"type": "number"},
        "carbs": {"type": "number"},
        "fats": {"type": "number"},
        "sodium": {"type": "number"},
        "caffeine": {"type": "number"},
        "total_grams": {"anyOf": [{"type": "number"}, {"type": "null"}]},
    },
    "required": [
        "name",
        "kcal",
        "protein",
        "carbs",
        "fats",
        "sodium",
        "caffeine",
        "total_grams",
    ],
    "additionalProperties": False,
}

_FIELD_GUIDE = (
    "Fields: name (descriptive food or meal name), kcal (calories), "
    "protein, carbs and fats (grams), sodium and caffeine (milligrams, "
    "caffeine 0 if not mentioned), total_grams (weight of the portion in "
    "grams, null if unknown). Use plain numbers without units or ~ signs. "
    "Treat European thousands separators like 1.360 as 1360. "
    "If salt is given instead of sodium, 1 g salt is about 400 mg sodium."
)


class FoodParserClient(Protocol):
    """Interface for LLM structured extraction."""

    async def extract(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return a JSON object matching the schema."""


class MealSearchClient(Protocol):
    """Interface for a web-grounded question answering provider."""

    async def search(self, query: str) -> dict[str, object]:
        """Return ``{"content": str, "citations": list[str]}``."""


@dataclass
class FoodParsingService:
    """Turns text or meal descriptions into catalog-ready nutrition values.

    Both collaborators are optional; a missing one makes the matching
    operation unavailable without affecting anything else.
    """

    parser_client: FoodParserClient | None
    search_client: MealSearchClient | None
    model: str
    reasoning_effort: str | None = None
    store: bool = False

    @property
    def can_parse(self) -> bool:
        return self.parser_client is not None

    @property
    def can_lookup(self) -> bool:
        return self.parser_client is not None and self.search_client is not None

    async def parse_text(self, text: str) -> ParsedFood:
        """Extract nutrition facts from a label, recipe or note."""
        if not text or not text.strip():
            raise ValidationError("Text is required")
        if not self.can_parse:
            raise UpstreamUnavailable(
                "AI parsing not available - OPENAI_API_KEY not configured"
            )
        prompt = (
            "Extract the nutritional information from the text below. "
            f"{_FIELD_GUIDE}\n\nText to parse:\n{text.strip()}"
        )
        return await self._extract(prompt)

    async def lookup_meal(self, description: str) -> MealLookupResult:
        """Search nutrition facts for a described meal, then structure them."""
        if not description or not description.strip():
            raise ValidationError("Meal description is required")
        if not self.can_lookup:
            raise UpstreamUnavailable(
                "Meal lookup not available - API keys not configured"
            )
        description = description.strip()
        query = (
            "What are the nutritional values (calories, protein, carbs, fats, "
            f"sodium, caffeine) for: {description}? "
            "Provide approximate totals for all items combined."
        )
        try:
            answer = await self.search_client.search(query)  # type: ignore[union-attr]
        except Exception as exc:
            _logger.exception("Meal search failed", extra={"description": description})
            raise UpstreamError("Failed to query the meal search provider") from exc

        content = str(answer.get("content") or "")
        citations = answer.get("citations") or []
        prompt = (
            "Extract the nutritional information from the text below. "
            f'Name the meal after the description "{description}". '
            "Use the combined totals when several items are listed and the "
            f"middle of any range (662-744 kcal is 703 kcal). {_FIELD_GUIDE}"
            f"\n\nText to parse:\n{content}"
        )
        parsed = await self._extract(prompt, fallback_name=description)
        return MealLookupResult(
            parsed=parsed,
            raw_response=content,
            sources=[str(source) for source in citations if source],
        )

    async def _extract(
        self, prompt: str, fallback_name: str | None = None
    ) -> ParsedFood:
        try:
            raw = await self.parser_client.extract(  # type: ignore[union-attr]
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                schema=FOOD_SCHEMA,
                prompt=prompt,
            )
        except Exception as exc:
            _logger.exception("Food parsing request failed")
            raise UpstreamError("Failed to parse text with AI") from exc
        if fallback_name and not str(raw.get("name") or "").strip():
            raw = {**raw, "name": fallback_name}
        try:
            return ParsedFood.model_validate(raw)
        except PydanticValidationError as exc:
            raise UpstreamError("AI response did not match the expected shape") from exc

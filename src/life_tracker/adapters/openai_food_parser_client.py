"""OpenAI Responses API client for structured food parsing."""

import json
import re
from dataclasses import dataclass

from openai import AsyncOpenAI

from life_tracker.services.food_parsing import FoodParserClient

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


@dataclass
class OpenAIFoodParserClient(FoodParserClient):
    """Food parser backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIFoodParserClient":
        """Create an OpenAI parser client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": [
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": "food_parse",
                    "strict": True,
                    "schema": schema,
                }
            },
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return extract_json_object(output_text)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()


def extract_json_object(text: str) -> dict[str, object]:
    """Parse a JSON object, tolerating prose around it."""
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        match = _JSON_OBJECT.search(text)
        if not match:
            raise ValueError("No JSON object found in model output") from None
        parsed = json.loads(match.group(0))
    if not isinstance(parsed, dict):
        raise ValueError("Model output is not a JSON object")
    return parsed

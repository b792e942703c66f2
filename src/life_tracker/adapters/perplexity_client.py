"""Perplexity chat completions client for web-grounded meal lookups."""

from dataclasses import dataclass

import httpx

from life_tracker.services.food_parsing import MealSearchClient


@dataclass
class HttpxPerplexityClient(MealSearchClient):
    """HTTPX-backed Perplexity client."""

    api_key: str
    base_url: str
    model: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str, model: str) -> "HttpxPerplexityClient":
        """Create a Perplexity client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            model=model,
            http_client=httpx.AsyncClient(),
        )

    async def search(self, query: str) -> dict[str, object]:
        """Ask the search model and return its answer with citations."""
        response = await self.http_client.post(
            f"{self.base_url}/chat/completions",
            headers={"Authorization": f"Bearer {self.api_key}"},
            json={
                "model": self.model,
                "messages": [{"role": "user", "content": query}],
            },
            timeout=60,
        )
        response.raise_for_status()
        payload = response.json()
        choices = payload.get("choices") or [{}]
        message = choices[0].get("message") or {}
        return {
            "content": message.get("content") or "",
            "citations": payload.get("citations") or [],
        }

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

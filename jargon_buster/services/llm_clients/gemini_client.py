"""
Gemini Client wrapper

Handles interactions with the Gemini generative-language REST API.
"""

from typing import Any, Optional

import httpx

from jargon_buster.core.config import settings
from jargon_buster.core.errors import ConfigurationError, UpstreamServiceError
from jargon_buster.core.logging import get_logger

logger = get_logger(__name__)

FALLBACK_TEXT = "Could not extract explanation from AI response."


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.model = model or settings.gemini_model
        self.base_url = (base_url or settings.gemini_api_url).rstrip("/")
        self.transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate_content(self, prompt: str) -> dict[str, Any]:
        """Send a single-turn text prompt and return the decoded response body"""
        if not self.api_key:
            logger.error("GEMINI_API_KEY environment variable not set.")
            raise ConfigurationError("Server configuration error: Missing API key.")

        request_body = {"contents": [{"parts": [{"text": prompt}]}]}

        async with httpx.AsyncClient(transport=self.transport) as client:
            response = await client.post(
                self.endpoint,
                params={"key": self.api_key},
                json=request_body,
            )

        if response.is_error:
            logger.error(
                f"Gemini API error: {response.status_code} {response.reason_phrase} {response.text}"
            )
            raise UpstreamServiceError(
                f"Failed to get explanation from AI service. Status: {response.status_code}",
                upstream_status=response.status_code,
            )
        return response.json()

    async def generate_text(self, prompt: str) -> str:
        """Return the first candidate's text, or FALLBACK_TEXT when the shape is unexpected"""
        data = await self.generate_content(prompt)
        text = extract_text(data)
        if text is None:
            logger.warning(f"Unexpected Gemini response structure: {data!r}")
            return FALLBACK_TEXT
        return text


def extract_text(data: Any) -> Optional[str]:
    """Pull candidates[0].content.parts[0].text out of a generateContent response"""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str):
        return None
    return text.strip()

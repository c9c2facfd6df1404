"""
Explanation Service

Builds the fixed explain-a-term prompt and asks the LLM for the answer.
"""

from typing import Optional

from jargon_buster.core.logging import get_logger
from jargon_buster.services.llm_clients.gemini_client import GeminiClient

logger = get_logger(__name__)

PROMPT_TEMPLATE = (
    'Explain the term "{term}" concisely, in 1-2 sentences, as you would to someone '
    "learning about it in the context of software development or technology. "
    "Focus on its core meaning and relevance."
)


def build_prompt(term: str) -> str:
    return PROMPT_TEMPLATE.format(term=term)


class ExplanationService:
    def __init__(self, client: Optional[GeminiClient] = None):
        self.client = client or GeminiClient()

    async def explain(self, term: str) -> str:
        logger.info("Calling Gemini API...")
        explanation = await self.client.generate_text(build_prompt(term))
        logger.info(f"Received explanation from Gemini: {explanation}")
        return explanation

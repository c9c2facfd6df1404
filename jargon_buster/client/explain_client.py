"""
Client for the explain-term proxy
"""

from typing import Optional

import httpx

from jargon_buster.client.errors import ExplainRequestError
from jargon_buster.client.repository import SessionProvider
from jargon_buster.client.rest import bearer, send


class ExplainClient:
    def __init__(self, http: httpx.AsyncClient, session_provider: SessionProvider):
        self.http = http
        self.session_provider = session_provider

    async def explain(self, term: str) -> Optional[str]:
        """The proxy's explanation text, or None when the reply has none"""
        session = self.session_provider()
        response = await send(
            self.http, "POST", "/explain-term",
            error_cls=ExplainRequestError,
            headers=bearer(session.access_token if session else None),
            json={"term": term},
        )
        try:
            data = response.json()
        except ValueError:
            return None
        explanation = data.get("explanation") if isinstance(data, dict) else None
        return explanation or None

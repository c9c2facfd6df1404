"""
Term data access

The store talks to a TermRepository; the REST implementation scopes every
call with the signed-in user's bearer token so the backend applies its
ownership rules.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

import httpx

from jargon_buster.client.auth_client import Session
from jargon_buster.client.errors import RemoteStoreError
from jargon_buster.client.rest import bearer, send
from jargon_buster.schemas.term import TermCreate, TermResponse, TermUpdate

SessionProvider = Callable[[], Optional[Session]]


class TermRepository(ABC):
    """Remote `terms` table as seen by one user"""

    @abstractmethod
    async def list_terms(self) -> List[TermResponse]:
        ...

    @abstractmethod
    async def insert_term(self, term_in: TermCreate) -> TermResponse:
        ...

    @abstractmethod
    async def update_term(self, term_id: str, changes: TermUpdate) -> TermResponse:
        ...

    @abstractmethod
    async def delete_term(self, term_id: str) -> None:
        ...


class RestTermRepository(TermRepository):
    def __init__(self, http: httpx.AsyncClient, session_provider: SessionProvider):
        self.http = http
        self.session_provider = session_provider

    def _headers(self) -> dict[str, str]:
        session = self.session_provider()
        return bearer(session.access_token if session else None)

    async def list_terms(self) -> List[TermResponse]:
        response = await send(self.http, "GET", "/terms", error_cls=RemoteStoreError, headers=self._headers())
        return [TermResponse.model_validate(row) for row in response.json()]

    async def insert_term(self, term_in: TermCreate) -> TermResponse:
        response = await send(
            self.http, "POST", "/terms",
            error_cls=RemoteStoreError,
            headers=self._headers(),
            json=term_in.model_dump(mode="json", by_alias=True),
        )
        return TermResponse.model_validate(response.json())

    async def update_term(self, term_id: str, changes: TermUpdate) -> TermResponse:
        response = await send(
            self.http, "PATCH", f"/terms/{term_id}",
            error_cls=RemoteStoreError,
            headers=self._headers(),
            json=changes.model_dump(mode="json", by_alias=True, exclude_unset=True),
        )
        return TermResponse.model_validate(response.json())

    async def delete_term(self, term_id: str) -> None:
        await send(self.http, "DELETE", f"/terms/{term_id}", error_cls=RemoteStoreError, headers=self._headers())

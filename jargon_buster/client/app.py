"""
Client application wiring

Builds the data-access objects on one httpx client and connects the auth
gate to the term store: every session change re-scopes the store.
"""

from typing import Optional

import httpx

from jargon_buster.client.auth_client import AuthClient, Session
from jargon_buster.client.auth_gate import AuthGate
from jargon_buster.client.config import ClientSettings
from jargon_buster.client.explain_client import ExplainClient
from jargon_buster.client.repository import RestTermRepository
from jargon_buster.client.rest import build_http_client
from jargon_buster.client.term_store import TermStore
from jargon_buster.client.term_view import AddTermForm, TermListView


class JargonBusterClient:
    def __init__(self, http: httpx.AsyncClient):
        self.http = http
        self.auth = AuthGate(AuthClient(http))

        self.store = TermStore(RestTermRepository(http, self._current_session))
        self.term_list = TermListView(self.store, ExplainClient(http, self._current_session))
        self.add_form = AddTermForm(self.store)

        self.auth.subscribe(self._on_session_change)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ClientSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "JargonBusterClient":
        return cls(build_http_client(settings or ClientSettings(), transport=transport))

    def _current_session(self) -> Optional[Session]:
        return self.auth.session

    @property
    def screen(self) -> str:
        return self.auth.screen

    async def _on_session_change(self, session: Optional[Session]) -> None:
        if session is None:
            self.term_list.cancel_edit()
            self.term_list.close_explanation()
            self.add_form.reset()
        await self.store.set_user(session.user.id if session else None)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "JargonBusterClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

"""
Conftest
"""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-jargon-buster-0123456789")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["PUBLIC_API_KEY"] = ""

from typing import AsyncGenerator, Awaitable, Callable, Dict, List, Optional

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from jargon_buster.client.errors import RemoteStoreError
from jargon_buster.client.repository import TermRepository
from jargon_buster.core.deps import get_db, get_explanation_service
from jargon_buster.main import app
from jargon_buster.models import Base
from jargon_buster.models.base import utcnow
from jargon_buster.schemas.term import TermCreate, TermResponse, TermUpdate
from jargon_buster.services.explanation_service import ExplanationService
from jargon_buster.services.llm_clients.gemini_client import GeminiClient

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"
API = "/api/v1"

USER_EMAIL = "test@example.com"
USER_PWD = "password123"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    # Override dependency
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


# ============ Gemini stub ============

def gemini_reply(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class GeminiStub:
    """Records generateContent calls and answers with a canned response"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.payload: object = gemini_reply("An API is a contract that lets programs talk to each other.")

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)

    def client(self, api_key: Optional[str] = "test-gemini-key") -> GeminiClient:
        return GeminiClient(api_key=api_key, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def gemini(client) -> GeminiStub:
    stub = GeminiStub()
    app.dependency_overrides[get_explanation_service] = lambda: ExplanationService(stub.client())
    return stub


# ============ Auth helpers ============

async def register_and_login(client: AsyncClient, email: str = USER_EMAIL, password: str = USER_PWD) -> Dict[str, str]:
    response = await client.post(f"{API}/auth/signup", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    response = await client.post(f"{API}/auth/token", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
async def auth_headers(client) -> Dict[str, str]:
    return await register_and_login(client)


# ============ In-memory term repository ============

class InMemoryTermRepository(TermRepository):
    """Behaves like the remote table for a single user"""

    def __init__(self, user_id: str = "user-1"):
        self.user_id = user_id
        self.rows: Dict[str, TermResponse] = {}
        self.calls: List[str] = []
        self.fail = False
        # Optional hook awaited before update_term answers
        self.before_update: Optional[Callable[[str], Awaitable[None]]] = None
        self._next_id = 0

    def _check(self, name: str) -> None:
        self.calls.append(name)
        if self.fail:
            raise RemoteStoreError("store unavailable", status_code=503)

    def seed(self, term: str, understood: bool = False, **fields) -> TermResponse:
        self._next_id += 1
        now = utcnow()
        row = TermResponse(
            id=f"term-{self._next_id}",
            term=term,
            definition=fields.get("definition", ""),
            initial_thoughts=fields.get("initial_thoughts"),
            notes=fields.get("notes"),
            eli5=fields.get("eli5"),
            understood=understood,
            date_added=now,
            created_at=now,
            date_understood=now if understood else None,
            user_id=self.user_id,
        )
        self.rows[row.id] = row
        return row

    async def list_terms(self) -> List[TermResponse]:
        self._check("list")
        return sorted(self.rows.values(), key=lambda t: (t.created_at, int(t.id.split("-")[1])), reverse=True)

    async def insert_term(self, term_in: TermCreate) -> TermResponse:
        self._check("insert")
        return self.seed(term_in.term, definition=term_in.definition, initial_thoughts=term_in.initial_thoughts)

    async def update_term(self, term_id: str, changes: TermUpdate) -> TermResponse:
        self._check("update")
        if self.before_update is not None:
            await self.before_update(term_id)
        if term_id not in self.rows:
            raise RemoteStoreError("Term not found", status_code=404)
        row = self.rows[term_id].model_copy(update=changes.model_dump(exclude_unset=True))
        self.rows[term_id] = row
        return row

    async def delete_term(self, term_id: str) -> None:
        self._check("delete")
        if term_id not in self.rows:
            raise RemoteStoreError("Term not found", status_code=404)
        del self.rows[term_id]


@pytest.fixture
def fake_repo() -> InMemoryTermRepository:
    return InMemoryTermRepository()

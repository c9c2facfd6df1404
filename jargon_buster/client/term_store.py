"""
Term Store

Client-side cache of the signed-in user's terms. Every mutation goes to the
repository first; the cache only ever takes the row the server sent back, and
a failed call leaves it untouched.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import ValidationError

from jargon_buster.client.errors import ClientError
from jargon_buster.client.repository import TermRepository
from jargon_buster.core.logging import get_logger
from jargon_buster.schemas.term import TermCreate, TermResponse, TermUpdate

logger = get_logger(__name__)


class TermStore:
    def __init__(self, repository: TermRepository, user_id: Optional[str] = None):
        self.repository = repository
        self.user_id = user_id
        self.terms: List[TermResponse] = []
        self._pending = 0
        # Latest request number per term id; older responses are dropped
        self._latest: Dict[str, int] = {}
        self._counter = 0

    @property
    def loading(self) -> bool:
        return self._pending > 0

    def get(self, term_id: str) -> Optional[TermResponse]:
        return next((t for t in self.terms if t.id == term_id), None)

    def understood_terms(self) -> List[TermResponse]:
        return [t for t in self.terms if t.understood]

    def not_understood_terms(self) -> List[TermResponse]:
        return [t for t in self.terms if not t.understood]

    def _next_request(self, term_id: str) -> int:
        self._counter += 1
        self._latest[term_id] = self._counter
        return self._counter

    def _replace(self, term_id: str, request_no: int, row: TermResponse) -> bool:
        if self._latest.get(term_id) != request_no:
            logger.debug(f"Discarding stale response for term {term_id}")
            return False
        self.terms = [row if t.id == term_id else t for t in self.terms]
        return True

    async def set_user(self, user_id: Optional[str]) -> None:
        """Switch identity; re-lists when it changed."""
        if user_id == self.user_id:
            return
        self.user_id = user_id
        self.terms = []
        self._latest.clear()
        if user_id is not None:
            await self.refresh()

    async def refresh(self) -> None:
        if self.user_id is None:
            self.terms = []
            return

        self._pending += 1
        try:
            self.terms = await self.repository.list_terms()
        except ClientError as e:
            logger.error(f"Error fetching terms: {e.message}")
            self.terms = []
        finally:
            self._pending -= 1

    async def add(self, term: str, definition: str = "", initial_thoughts: str = "") -> Optional[TermResponse]:
        if self.user_id is None:
            logger.error("Cannot add term: no signed-in user")
            return None
        if not term or not term.strip():
            logger.warning("Refusing to add a term with an empty name")
            return None

        try:
            payload = TermCreate(term=term, definition=definition, initial_thoughts=initial_thoughts)
        except ValidationError as e:
            logger.warning(f"Refusing to add invalid term: {e.errors()[0]['msg']}")
            return None

        self._pending += 1
        try:
            created = await self.repository.insert_term(payload)
        except ClientError as e:
            logger.error(f"Error adding term: {e.message}")
            return None
        finally:
            self._pending -= 1

        self.terms = [created, *self.terms]
        return created

    async def update(
        self,
        term_id: str,
        term: str,
        definition: str,
        notes: Optional[str] = None,
        eli5: Optional[str] = None,
    ) -> Optional[TermResponse]:
        if not term or not term.strip():
            logger.warning(f"Refusing to save term {term_id} with an empty name")
            return None

        try:
            changes = TermUpdate(term=term, definition=definition, notes=notes, eli5=eli5)
        except ValidationError as e:
            logger.warning(f"Refusing to save invalid term {term_id}: {e.errors()[0]['msg']}")
            return None

        request_no = self._next_request(term_id)
        self._pending += 1
        try:
            updated = await self.repository.update_term(term_id, changes)
        except ClientError as e:
            logger.error(f"Error updating term: {e.message}")
            return None
        finally:
            self._pending -= 1

        self._replace(term_id, request_no, updated)
        return updated

    async def toggle_understood(self, term_id: str) -> Optional[TermResponse]:
        current = self.get(term_id)
        if current is None:
            return None

        understood = not current.understood
        date_understood = datetime.now(timezone.utc) if understood else None

        request_no = self._next_request(term_id)
        self._pending += 1
        try:
            updated = await self.repository.update_term(
                term_id, TermUpdate(understood=understood, date_understood=date_understood)
            )
        except ClientError as e:
            logger.error(f"Error toggling understood status: {e.message}")
            return None
        finally:
            self._pending -= 1

        self._replace(term_id, request_no, updated)
        return updated

    async def delete(self, term_id: str) -> bool:
        self._pending += 1
        try:
            await self.repository.delete_term(term_id)
        except ClientError as e:
            logger.error(f"Error deleting term: {e.message}")
            return False
        finally:
            self._pending -= 1

        self.terms = [t for t in self.terms if t.id != term_id]
        self._latest.pop(term_id, None)
        return True

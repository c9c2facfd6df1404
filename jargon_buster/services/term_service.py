"""
Term Service

Owner-scoped CRUD over the terms table. Every query filters on user_id, so a
row belonging to someone else behaves exactly like a missing one.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jargon_buster.core.errors import NotFoundError
from jargon_buster.core.logging import get_logger
from jargon_buster.models.base import utcnow
from jargon_buster.models.term import Term
from jargon_buster.schemas.term import TermCreate, TermUpdate

logger = get_logger(__name__)


class TermService:
    def __init__(self, session: AsyncSession, user_id: str):
        self.session = session
        self.user_id = user_id

    async def list_terms(self) -> List[Term]:
        stmt = (
            select(Term)
            .where(Term.user_id == self.user_id)
            .order_by(Term.created_at.desc(), Term.date_added.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_term(self, term_id: str) -> Term:
        stmt = select(Term).where(Term.id == term_id, Term.user_id == self.user_id)
        result = await self.session.execute(stmt)
        term = result.scalar_one_or_none()
        if term is None:
            raise NotFoundError("Term not found")
        return term

    async def create_term(self, term_in: TermCreate) -> Term:
        now = utcnow()
        term = Term(
            user_id=self.user_id,
            term=term_in.term,
            definition=term_in.definition,
            initial_thoughts=term_in.initial_thoughts,
            understood=False,
            date_added=now,
            created_at=now,
            updated_at=now,
        )
        self.session.add(term)
        await self.session.commit()
        await self.session.refresh(term)
        logger.info(f"Term {term.id} created for user {self.user_id}")
        return term

    async def update_term(self, term_id: str, term_in: TermUpdate) -> Term:
        term = await self.get_term(term_id)
        data = term_in.model_dump(exclude_unset=True)

        for field in ("term", "definition", "notes", "eli5"):
            if field in data and data[field] is not None:
                setattr(term, field, data[field])

        if data.get("understood") is not None:
            term.understood = data["understood"]
            if term.understood:
                term.date_understood = data.get("date_understood") or term.date_understood or utcnow()
            else:
                term.date_understood = None
        elif "date_understood" in data and term.understood and data["date_understood"] is not None:
            term.date_understood = data["date_understood"]

        await self.session.commit()
        await self.session.refresh(term)
        return term

    async def delete_term(self, term_id: str) -> None:
        term = await self.get_term(term_id)
        await self.session.delete(term)
        await self.session.commit()
        logger.info(f"Term {term_id} deleted for user {self.user_id}")

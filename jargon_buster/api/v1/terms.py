"""
Terms Endpoints

Owner-scoped CRUD over the signed-in user's terms.
"""

from typing import List

from fastapi import APIRouter, Response, status

from jargon_buster.core.deps import CurrentUserDep, SessionDep
from jargon_buster.schemas.term import TermCreate, TermResponse, TermUpdate
from jargon_buster.services.term_service import TermService

router = APIRouter()


@router.get("", response_model=List[TermResponse])
async def list_terms(user: CurrentUserDep, db: SessionDep):
    """All of the caller's terms, newest first."""
    return await TermService(db, user.id).list_terms()


@router.post("", response_model=TermResponse, status_code=status.HTTP_201_CREATED)
async def create_term(term_in: TermCreate, user: CurrentUserDep, db: SessionDep):
    return await TermService(db, user.id).create_term(term_in)


@router.get("/{term_id}", response_model=TermResponse)
async def get_term(term_id: str, user: CurrentUserDep, db: SessionDep):
    return await TermService(db, user.id).get_term(term_id)


@router.patch("/{term_id}", response_model=TermResponse)
async def update_term(term_id: str, term_in: TermUpdate, user: CurrentUserDep, db: SessionDep):
    """
    Partial update. Setting `understood` also stamps or clears
    `dateUnderstood` so the two never disagree.
    """
    return await TermService(db, user.id).update_term(term_id, term_in)


@router.delete("/{term_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_term(term_id: str, user: CurrentUserDep, db: SessionDep):
    await TermService(db, user.id).delete_term(term_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

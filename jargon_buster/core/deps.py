"""
Dependency Injection

FastAPI dependencies for routes.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from jargon_buster.core.config import settings
from jargon_buster.core.errors import AuthenticationError
from jargon_buster.core.security import verify_token
from jargon_buster.infra.db import get_db
from jargon_buster.models.user import User
from jargon_buster.services.explanation_service import ExplanationService

UNAUTHORIZED_MESSAGE = "Unauthorized: Invalid or missing authentication token."

# auto_error=False so a missing header goes through our own 401 body
bearer_scheme = HTTPBearer(auto_error=False)

# Type aliases for common dependencies
SessionDep = Annotated[AsyncSession, Depends(get_db)]


async def get_current_user(
    session: SessionDep,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> User:
    """
    Validate the bearer token and load its user.
    A token for a deleted user is rejected like an invalid one.
    """
    if credentials is None:
        raise AuthenticationError(UNAUTHORIZED_MESSAGE)

    user_id = verify_token(credentials.credentials)
    if not user_id:
        raise AuthenticationError(UNAUTHORIZED_MESSAGE)

    user = await session.get(User, user_id)
    if user is None:
        raise AuthenticationError(UNAUTHORIZED_MESSAGE)
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]


async def verify_api_key(apikey: Annotated[Optional[str], Header()] = None) -> None:
    """Require the public `apikey` header when one is configured"""
    if settings.public_api_key and apikey != settings.public_api_key:
        raise AuthenticationError("Invalid API key")


def get_explanation_service() -> ExplanationService:
    return ExplanationService()


ExplanationServiceDep = Annotated[ExplanationService, Depends(get_explanation_service)]

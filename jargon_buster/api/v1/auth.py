"""
Auth Endpoints

Password sign-up/sign-in issuing bearer tokens, current-user lookup and
sign-out.
"""

from fastapi import APIRouter, Response, status

from jargon_buster.core.config import settings
from jargon_buster.core.deps import CurrentUserDep, SessionDep
from jargon_buster.core.errors import BadRequestError
from jargon_buster.core.logging import get_logger
from jargon_buster.core.security import create_access_token
from jargon_buster.schemas.auth import Credentials, SignInRequest, Token, UserResponse
from jargon_buster.services.auth_service import AuthService

logger = get_logger(__name__)

router = APIRouter()


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(credentials: Credentials, db: SessionDep):
    """Create an account. The caller still has to sign in afterwards."""
    user = await AuthService(db).create_user(credentials)
    logger.info(f"User {user.id} registered")
    return user


@router.post("/token", response_model=Token)
async def sign_in(credentials: SignInRequest, db: SessionDep):
    """Exchange email and password for an access token."""
    user = await AuthService(db).authenticate_user(credentials)
    if user is None:
        raise BadRequestError("Invalid login credentials")

    return Token(
        access_token=create_access_token(user.id),
        expires_in=settings.access_token_expire_minutes * 60,
        user=UserResponse.model_validate(user),
    )


@router.get("/user", response_model=UserResponse)
async def current_user(user: CurrentUserDep):
    return user


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(user: CurrentUserDep):
    # Tokens are stateless; the client drops its copy.
    logger.info(f"User {user.id} signed out")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""
Auth Service

User registration and authentication logic.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jargon_buster.core.errors import BadRequestError
from jargon_buster.core.security import get_password_hash, verify_password
from jargon_buster.models.user import User
from jargon_buster.schemas.auth import Credentials, SignInRequest


class AuthService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        result = await self.session.execute(select(User).where(User.email == email.lower()))
        return result.scalars().first()

    async def authenticate_user(self, login_data: SignInRequest) -> Optional[User]:
        """Authenticate user by email and password"""
        user = await self.get_user_by_email(login_data.email)
        if not user:
            return None
        if not verify_password(login_data.password, user.hashed_password):
            return None
        return user

    async def create_user(self, user_in: Credentials) -> User:
        """Create a new user"""
        if await self.get_user_by_email(user_in.email):
            raise BadRequestError("User already registered")

        user = User(
            email=user_in.email.lower(),
            hashed_password=get_password_hash(user_in.password),
        )
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

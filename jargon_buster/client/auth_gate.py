"""
Auth Gate

Holds the current session. Without one the app shows the credential form,
with one it shows the term screens.
"""

from typing import Awaitable, Callable, List, Literal, Optional

from jargon_buster.client.auth_client import AuthClient, Session
from jargon_buster.client.errors import AuthApiError
from jargon_buster.core.logging import get_logger

logger = get_logger(__name__)

SIGN_UP_MESSAGE = "Check your email for the login link!"

SessionListener = Callable[[Optional[Session]], Awaitable[None]]


class AuthGate:
    def __init__(self, client: AuthClient):
        self.client = client
        self.session: Optional[Session] = None
        self.loading = False
        self.error: Optional[str] = None
        self.message: Optional[str] = None
        self._listeners: List[SessionListener] = []

    @property
    def screen(self) -> Literal["auth", "terms"]:
        return "terms" if self.session else "auth"

    @property
    def user_id(self) -> Optional[str]:
        return self.session.user.id if self.session else None

    def subscribe(self, listener: SessionListener) -> None:
        """Call `listener(session)` after every session change"""
        self._listeners.append(listener)

    async def _set_session(self, session: Optional[Session]) -> None:
        self.session = session
        for listener in self._listeners:
            await listener(session)

    def _begin(self) -> bool:
        if self.loading:
            return False
        self.loading = True
        self.error = None
        self.message = None
        return True

    async def sign_in(self, email: str, password: str) -> None:
        if not self._begin():
            return
        try:
            session = await self.client.sign_in_with_password(email, password)
        except AuthApiError as e:
            self.error = e.message
            return
        finally:
            self.loading = False
        await self._set_session(session)

    async def sign_up(self, email: str, password: str) -> None:
        if not self._begin():
            return
        try:
            await self.client.sign_up(email, password)
            self.message = SIGN_UP_MESSAGE
        except AuthApiError as e:
            self.error = e.message
        finally:
            self.loading = False

    async def restore_session(self, access_token: str) -> bool:
        """Re-validate a stored token; installs the session when still valid."""
        try:
            user = await self.client.get_user(access_token)
        except AuthApiError as e:
            logger.info(f"Stored session rejected: {e.message}")
            await self._set_session(None)
            return False
        await self._set_session(Session(access_token=access_token, user=user))
        return True

    async def sign_out(self) -> None:
        if self.session is None:
            return
        try:
            await self.client.sign_out(self.session.access_token)
        except AuthApiError as e:
            logger.error(f"Error signing out: {e.message}")
        await self._set_session(None)

"""
Auth collaborator client

Thin wrapper over the backend's /auth endpoints.
"""

import httpx

from jargon_buster.client.errors import AuthApiError
from jargon_buster.client.rest import bearer, send
from jargon_buster.schemas.auth import Token, UserResponse

# A signed-in session is exactly what the token endpoint returns
Session = Token


class AuthClient:
    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def sign_in_with_password(self, email: str, password: str) -> Session:
        response = await send(
            self.http, "POST", "/auth/token",
            error_cls=AuthApiError,
            json={"email": email, "password": password},
        )
        return Session.model_validate(response.json())

    async def sign_up(self, email: str, password: str) -> UserResponse:
        response = await send(
            self.http, "POST", "/auth/signup",
            error_cls=AuthApiError,
            json={"email": email, "password": password},
        )
        return UserResponse.model_validate(response.json())

    async def get_user(self, access_token: str) -> UserResponse:
        response = await send(
            self.http, "GET", "/auth/user",
            error_cls=AuthApiError,
            headers=bearer(access_token),
        )
        return UserResponse.model_validate(response.json())

    async def sign_out(self, access_token: str) -> None:
        await send(
            self.http, "POST", "/auth/logout",
            error_cls=AuthApiError,
            headers=bearer(access_token),
        )

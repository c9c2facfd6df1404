"""
CORS middleware

App-wide CORS handling that leaves some paths alone. Excluded paths answer
preflight themselves with a fixed set of headers.
"""

from typing import Iterable

from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class PathExcludingCORSMiddleware(CORSMiddleware):
    def __init__(self, app: ASGIApp, exclude_paths: Iterable[str] = (), **kwargs):
        super().__init__(app, **kwargs)
        self.exclude_paths = frozenset(exclude_paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"] in self.exclude_paths:
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)

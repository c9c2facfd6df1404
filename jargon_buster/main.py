"""
FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException

from jargon_buster.api.v1.explain import EXPLAIN_PATH
from jargon_buster.api.v1.router import api_router
from jargon_buster.core.config import settings
from jargon_buster.core.cors import PathExcludingCORSMiddleware
from jargon_buster.core.errors import (
    AppError,
    app_exception_handler,
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from jargon_buster.core.logging import RequestIDMiddleware, get_logger, setup_logging
from jargon_buster.infra.db import close_db_connection, init_db

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    await init_db()
    logger.info("Jargon Buster backend started")

    yield

    # Shutdown
    await close_db_connection()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Jargon Buster Backend",
        description="Personal vocabulary tracker with AI explanations",
        version="0.1.0",
        openapi_url=f"{settings.api_prefix}/openapi.json",
        lifespan=lifespan,
    )

    # Middleware
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        PathExcludingCORSMiddleware,
        # explain-term answers its own preflight with fixed headers
        exclude_paths=[f"{settings.api_prefix}{EXPLAIN_PATH}"],
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes
    app.include_router(api_router, prefix=settings.api_prefix)

    # Exception Handlers
    app.add_exception_handler(AppError, app_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    return app


app = create_app()

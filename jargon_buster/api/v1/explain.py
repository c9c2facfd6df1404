"""
Explain Term Endpoint

Stateless proxy: authenticates the caller, validates the term and relays a
short explanation from the generative-language API.
"""

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from jargon_buster.core.deps import CurrentUserDep, ExplanationServiceDep
from jargon_buster.core.errors import CORS_HEADERS, AppError, BadRequestError
from jargon_buster.core.logging import get_logger
from jargon_buster.schemas.explain import ErrorResponse, ExplainResponse

logger = get_logger(__name__)

router = APIRouter()

EXPLAIN_PATH = "/explain-term"

INVALID_TERM_MESSAGE = 'Missing or invalid "term" in request body'


@router.options(EXPLAIN_PATH, include_in_schema=False)
async def explain_term_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post(
    EXPLAIN_PATH,
    response_model=ExplainResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def explain_term(request: Request, user: CurrentUserDep, service: ExplanationServiceDep):
    """
    Body: {"term": "<text>"}. Returns {"explanation": "<text>"}.
    """
    logger.info(f"Authenticated user: {user.id}")
    try:
        body = await request.json()
        term = body.get("term") if isinstance(body, dict) else None
        if not term or not isinstance(term, str):
            raise BadRequestError(INVALID_TERM_MESSAGE)

        logger.info(f"Received term: {term}")
        explanation = await service.explain(term)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Error processing request: {e}", exc_info=True)
        raise AppError("Failed to process request", details=str(e) or type(e).__name__)

    return JSONResponse(
        content=ExplainResponse(explanation=explanation).model_dump(),
        headers=CORS_HEADERS,
    )

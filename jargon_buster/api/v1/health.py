from fastapi import APIRouter
from sqlalchemy import text

from jargon_buster.core.deps import SessionDep
from jargon_buster.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(db: SessionDep):
    """Report API liveness and whether the database answers SELECT 1."""
    status = {"api": "ok", "db": "ok"}
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        status["db"] = "error"
    return status

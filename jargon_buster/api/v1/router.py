"""
API Router configuration
"""

from fastapi import APIRouter, Depends

from jargon_buster.api.v1 import auth, explain, health, terms
from jargon_buster.core.deps import verify_api_key

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"], dependencies=[Depends(verify_api_key)])
api_router.include_router(terms.router, prefix="/terms", tags=["terms"], dependencies=[Depends(verify_api_key)])
api_router.include_router(explain.router, tags=["explain"])

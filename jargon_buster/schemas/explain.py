"""
Explain Schemas
"""

from typing import Optional

from pydantic import BaseModel


class ExplainResponse(BaseModel):
    explanation: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None

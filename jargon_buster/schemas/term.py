"""
Term Schemas

Wire names follow the stored row: camelCase for the user-facing fields,
snake_case for `created_at` and `user_id`.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

TERM_MAX_LENGTH = 255


def _clean_term(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("Term must not be blank")
    return v


class TermCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    term: str = Field(min_length=1, max_length=TERM_MAX_LENGTH)
    definition: str = ""
    initial_thoughts: Optional[str] = Field(default=None, alias="initialThoughts")

    @field_validator("term")
    @classmethod
    def validate_term(cls, v: str) -> str:
        return _clean_term(v)


class TermUpdate(BaseModel):
    """Partial update; only fields present in the request are applied"""

    model_config = ConfigDict(populate_by_name=True)

    term: Optional[str] = Field(default=None, min_length=1, max_length=TERM_MAX_LENGTH)
    definition: Optional[str] = None
    notes: Optional[str] = None
    eli5: Optional[str] = None
    understood: Optional[bool] = None
    date_understood: Optional[datetime] = Field(default=None, alias="dateUnderstood")

    @field_validator("term")
    @classmethod
    def validate_term(cls, v: Optional[str]) -> Optional[str]:
        return _clean_term(v)


class TermResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    term: str
    definition: Optional[str] = ""
    initial_thoughts: Optional[str] = Field(default=None, alias="initialThoughts")
    notes: Optional[str] = None
    eli5: Optional[str] = None
    understood: bool = False
    date_added: Optional[datetime] = Field(default=None, alias="dateAdded")
    created_at: Optional[datetime] = None
    date_understood: Optional[datetime] = Field(default=None, alias="dateUnderstood")
    user_id: Optional[str] = None

# File: api/models/search_models.py
from typing import Any, List, Optional
from pydantic import BaseModel, Field, StrictStr, field_validator

from services.schema.paper_schema import Study

QUERY_REQUIRED_MESSAGE = "Query is required and must be a non-empty string."
INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


def _require_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(QUERY_REQUIRED_MESSAGE)
    return value


class SearchPapersRequest(BaseModel):
    query: StrictStr
    # Clamped by the search service, so anything is accepted here
    limit: Optional[Any] = None

    @field_validator("query")
    @classmethod
    def query_not_blank(cls, value: str) -> str:
        return _require_text(value)


class SmartSearchRequest(BaseModel):
    userQuery: StrictStr

    @field_validator("userQuery")
    @classmethod
    def query_not_blank(cls, value: str) -> str:
        return _require_text(value)


class SmartSearchResponse(BaseModel):
    studies: List[Study] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None

# services/schema/paper_schema.py
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

UNTITLED = "Untitled"


class UnifiedPaperResult(BaseModel):
    """
    One paper as returned by any source, in the shape every
    downstream step (merge, rank, response) works with.
    """
    title: str
    authors: List[str] = Field(default_factory=list)
    year: Optional[int] = None
    source: str
    abstract: Optional[str] = None
    study_type: Optional[str] = None
    citation_count: Optional[int] = None
    pdf_link: Optional[str] = None
    doi: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be empty")
        return value

    @field_validator("year", "citation_count")
    @classmethod
    def non_negative(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError("must be a non-negative integer")
        return value


class Study(BaseModel):
    # Display-oriented view used by the smart search page
    title: str
    authors: List[str] = Field(default_factory=list)
    year: Optional[int] = None
    studyType: str
    sampleSize: Optional[str] = None
    keyFindings: str
    supportingQuote: Optional[str] = None

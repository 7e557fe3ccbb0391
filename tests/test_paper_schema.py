# tests/test_paper_schema.py
import pytest
from pydantic import ValidationError

from services.schema.paper_schema import UnifiedPaperResult


@pytest.mark.parametrize("overrides", [
    {"title": "  "},
    {"title": ""},
    {"year": -1},
    {"citation_count": -1},
])
def test_invalid_fields_are_rejected(overrides):
    fields = {"title": "Caffeine and memory", "source": "arXiv", **overrides}
    with pytest.raises(ValidationError):
        UnifiedPaperResult(**fields)


@pytest.mark.parametrize("value", [None, 0])
def test_absent_and_zero_counts_are_accepted(value):
    paper = UnifiedPaperResult(title="Caffeine", source="PubMed", year=value, citation_count=value)

    assert paper.year == value
    assert paper.citation_count == value
    assert paper.authors == []
    assert paper.study_type is None

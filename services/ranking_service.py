# File: services/ranking_service.py
from typing import List, Optional, Sequence, Tuple

from services.schema.paper_schema import UnifiedPaperResult

MISSING_CITATIONS = -1
MISSING_YEAR = 0


def rank_key(paper: UnifiedPaperResult) -> Tuple[int, int, str]:
    """
    Most cited first, then newest, then title A-Z.
    Unknown citation counts sort below zero, unknown years as oldest.
    """
    citations = paper.citation_count if paper.citation_count is not None else MISSING_CITATIONS
    year = paper.year if paper.year is not None else MISSING_YEAR
    return (-citations, -year, paper.title)


def rank_papers(papers: Sequence[UnifiedPaperResult], limit: Optional[int] = None) -> List[UnifiedPaperResult]:
    ranked = sorted(papers, key=rank_key)
    if limit is not None:
        ranked = ranked[:max(limit, 0)]
    return ranked

# File: services/smart_search_service.py
import logging
from typing import List

from agents.data_acquisition_agent import DataAcquisitionAgent
from services.schema.paper_schema import UNTITLED, Study, UnifiedPaperResult
from services.search_service import search_papers

logger = logging.getLogger(__name__)

SMART_SEARCH_LIMIT = 20
NOT_AVAILABLE = "N/A"
NO_ABSTRACT = "No abstract available."


def paper_to_study(paper: UnifiedPaperResult) -> Study:
    return Study(
        title=paper.title or UNTITLED,
        authors=paper.authors or [],
        year=paper.year,
        # No study-type classification yet; the source name stands in
        studyType=paper.source or NOT_AVAILABLE,
        sampleSize=NOT_AVAILABLE,
        keyFindings=paper.abstract or NO_ABSTRACT,
        supportingQuote=None,
    )


async def smart_search(user_query: str, acquisition_agent: DataAcquisitionAgent) -> List[Study]:
    papers = await search_papers(user_query, SMART_SEARCH_LIMIT, acquisition_agent)
    studies = [paper_to_study(p) for p in papers]
    logger.info(f"Mapped {len(studies)} studies for smart search")
    return studies

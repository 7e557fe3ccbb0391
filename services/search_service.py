# File: services/search_service.py

import logging
from typing import Any, List

from agents.data_acquisition_agent import DataAcquisitionAgent
from agents.data_merger_agent import DataMergerAgent
from services.ranking_service import rank_papers
from services.schema.paper_schema import UnifiedPaperResult

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50
MIN_LIMIT = 1
MAX_LIMIT = 50


def clamp_limit(limit: Any = None) -> int:
    """
    Effective result count for a request. Missing or non-integer values
    use the default; anything else is clamped into [MIN_LIMIT, MAX_LIMIT].
    """
    if limit is None or isinstance(limit, bool):
        return DEFAULT_LIMIT

    if isinstance(limit, float):
        if limit != limit or limit in (float("inf"), float("-inf")):
            return DEFAULT_LIMIT
        limit = int(limit)
    elif not isinstance(limit, int):
        try:
            limit = int(str(limit).strip())
        except ValueError:
            return DEFAULT_LIMIT

    return min(max(MIN_LIMIT, limit), MAX_LIMIT)


async def search_papers(
    query: str,
    limit: Any,
    acquisition_agent: DataAcquisitionAgent,
) -> List[UnifiedPaperResult]:
    """
    PIPELINE:
    1. Multi-source acquisition (per-source failures absorbed there)
    2. Deduplication + field merge
    3. Ranking + truncation
    """
    effective_limit = clamp_limit(limit)

    papers = await acquisition_agent.run(query, effective_limit)
    merged = DataMergerAgent().merge(papers)
    ranked = rank_papers(merged, effective_limit)

    logger.info(f"🏁 Search '{query}': returning {len(ranked)} of {len(merged)} unique papers")
    return ranked

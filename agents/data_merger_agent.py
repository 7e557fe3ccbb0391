# agents/data_merger_agent.py
import logging
from typing import Dict, List

from services.schema.paper_schema import UnifiedPaperResult
from utils.id_normalization import build_identity_key

logger = logging.getLogger(__name__)

# Only these are filled in from later duplicates; everything else is first-seen
MERGEABLE_FIELDS = ("abstract", "citation_count", "pdf_link")


def identity_key(paper: UnifiedPaperResult) -> str:
    return build_identity_key(paper.doi, paper.title, paper.year)


class DataMergerAgent:
    """
    Deduplicates papers across all acquisition agents.

    The first record seen for an identity key is kept; later duplicates
    only fill in its missing abstract / citation count / PDF link and are
    then dropped.
    """

    def merge(self, papers: List[UnifiedPaperResult]) -> List[UnifiedPaperResult]:
        index: Dict[str, UnifiedPaperResult] = {}

        for paper in papers:
            key = identity_key(paper)

            # ----------------------------
            # First occurrence = store
            # ----------------------------
            if key not in index:
                index[key] = paper
                continue

            # ----------------------------
            # Merge duplicate
            # ----------------------------
            existing = index[key]
            for field in MERGEABLE_FIELDS:
                if getattr(existing, field) is None:
                    value = getattr(paper, field)
                    if value is not None:
                        setattr(existing, field, value)

        merged = list(index.values())
        logger.info(f"🔗 DataMerger merged {len(papers)} → {len(merged)} unique papers")

        return merged

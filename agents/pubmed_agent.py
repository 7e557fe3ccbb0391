# agents/pubmed_agent.py
from typing import List, Optional

from agents.base_agent import SourceAgent
from clients.pubmed_client import PubMedArticleId, PubMedSummary, search_pubmed
from services.data_normalization_service import normalize_authors, normalize_date
from services.schema.paper_schema import UNTITLED, UnifiedPaperResult
from utils.id_normalization import strip_doi_prefix
from utils.sanitization import optional_text


def _doi_from_article_ids(article_ids: List[PubMedArticleId]) -> Optional[str]:
    for article_id in article_ids or []:
        if isinstance(article_id, dict) and article_id.get("idtype") == "doi":
            return strip_doi_prefix(article_id.get("value"))
    return None


class PubMedAgent(SourceAgent):
    source_name = "PubMed"

    def _search(self, query: str, limit: int) -> List[PubMedSummary]:
        return search_pubmed(query, limit, api_key=self.api_key, timeout=self.request_timeout)

    def _normalize(self, raw: PubMedSummary) -> UnifiedPaperResult:
        # esummary carries no abstract, citation count or PDF link
        return UnifiedPaperResult(
            title=optional_text(raw.get("title")) or UNTITLED,
            authors=normalize_authors(raw.get("authors")),
            year=normalize_date(raw.get("pubdate")) or normalize_date(raw.get("sortpubdate")),
            source=self.source_name,
            abstract=None,
            citation_count=None,
            pdf_link=None,
            doi=_doi_from_article_ids(raw.get("articleids")),
        )

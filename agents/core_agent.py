# agents/core_agent.py
from typing import List

from agents.base_agent import SourceAgent
from clients.core_client import CoreWork, search_core
from services.data_normalization_service import normalize_authors, normalize_count, normalize_date
from services.schema.paper_schema import UNTITLED, UnifiedPaperResult
from utils.id_normalization import strip_doi_prefix
from utils.sanitization import optional_text


class CoreAgent(SourceAgent):
    source_name = "CORE"
    requires_api_key = True

    def _search(self, query: str, limit: int) -> List[CoreWork]:
        return search_core(query, limit, api_key=self.api_key, timeout=self.request_timeout)

    def _normalize(self, raw: CoreWork) -> UnifiedPaperResult:
        year = normalize_date(raw.get("yearPublished"))
        if year is None:
            year = normalize_date(raw.get("publishedDate"))

        return UnifiedPaperResult(
            title=optional_text(raw.get("title")) or UNTITLED,
            authors=normalize_authors(raw.get("authors")),
            year=year,
            source=self.source_name,
            abstract=optional_text(raw.get("abstract")),
            citation_count=normalize_count(raw.get("citationCount")),
            pdf_link=optional_text(raw.get("downloadUrl")),
            doi=strip_doi_prefix(raw.get("doi")),
        )

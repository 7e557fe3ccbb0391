# agents/semantic_scholar_agent.py
from typing import List

from agents.base_agent import SourceAgent
from clients.semantic_scholar_client import S2Paper, search_semantic_scholar
from services.data_normalization_service import normalize_authors, normalize_count, normalize_date
from services.schema.paper_schema import UNTITLED, UnifiedPaperResult
from utils.id_normalization import strip_doi_prefix
from utils.sanitization import optional_text


class SemanticScholarAgent(SourceAgent):
    source_name = "Semantic Scholar"
    requires_api_key = True

    def _search(self, query: str, limit: int) -> List[S2Paper]:
        return search_semantic_scholar(query, limit, api_key=self.api_key, timeout=self.request_timeout)

    def _normalize(self, raw: S2Paper) -> UnifiedPaperResult:
        ext_ids = raw.get("externalIds") or {}
        pdf = raw.get("openAccessPdf") or {}

        return UnifiedPaperResult(
            title=optional_text(raw.get("title")) or UNTITLED,
            authors=normalize_authors(raw.get("authors")),
            year=normalize_date(raw.get("year")),
            source=self.source_name,
            abstract=optional_text(raw.get("abstract")),
            citation_count=normalize_count(raw.get("citationCount")),
            pdf_link=optional_text(pdf.get("url")),
            doi=strip_doi_prefix(ext_ids.get("DOI")),
        )

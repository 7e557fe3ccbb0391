# agents/arxiv_agent.py
from typing import List

from agents.base_agent import SourceAgent
from clients.arxiv_client import ArxivEntry, search_arxiv
from services.data_normalization_service import normalize_authors, normalize_date
from services.schema.paper_schema import UNTITLED, UnifiedPaperResult
from utils.id_normalization import arxiv_doi_from_link, strip_doi_prefix
from utils.sanitization import optional_text


class ArxivAgent(SourceAgent):
    source_name = "arXiv"

    def _search(self, query: str, limit: int) -> List[ArxivEntry]:
        return search_arxiv(query, limit, timeout=self.request_timeout)

    def _normalize(self, raw: ArxivEntry) -> UnifiedPaperResult:
        # Journal DOI when the authors registered one, else the arXiv-issued DOI
        doi = strip_doi_prefix(raw.get("doi")) or arxiv_doi_from_link(raw.get("id"))

        return UnifiedPaperResult(
            title=optional_text(raw.get("title")) or UNTITLED,
            authors=normalize_authors(raw.get("authors")),
            year=normalize_date(raw.get("published")),
            source=self.source_name,
            abstract=optional_text(raw.get("summary")),
            citation_count=None,
            pdf_link=optional_text(raw.get("pdf_url")),
            doi=doi,
        )

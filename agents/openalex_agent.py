# agents/openalex_agent.py
from typing import Dict, List, Optional

from agents.base_agent import SourceAgent
from clients.openalex_client import OpenAlexWork, search_openalex
from services.data_normalization_service import normalize_authors, normalize_count, normalize_date
from services.schema.paper_schema import UNTITLED, UnifiedPaperResult
from utils.id_normalization import strip_doi_prefix
from utils.sanitization import optional_text


def rebuild_abstract(inverted_index: Optional[Dict[str, List[int]]]) -> Optional[str]:
    """
    OpenAlex ships abstracts as {word: [positions]}; put the words back in order.
    """
    if not inverted_index or not isinstance(inverted_index, dict):
        return None

    positioned = [
        (pos, word)
        for word, positions in inverted_index.items()
        for pos in positions or []
    ]
    if not positioned:
        return None

    positioned.sort()
    return optional_text(" ".join(word for _, word in positioned))


class OpenAlexAgent(SourceAgent):
    source_name = "OpenAlex"

    def __init__(self, email: Optional[str] = None, request_timeout: float = 6.0):
        super().__init__(api_key=None, request_timeout=request_timeout)
        self.email = email

    def _search(self, query: str, limit: int) -> List[OpenAlexWork]:
        return search_openalex(query, limit, email=self.email, timeout=self.request_timeout)

    def _normalize(self, raw: OpenAlexWork) -> UnifiedPaperResult:
        best_location = raw.get("best_oa_location") or {}
        open_access = raw.get("open_access") or {}
        pdf_link = optional_text(best_location.get("pdf_url")) or optional_text(open_access.get("oa_url"))

        return UnifiedPaperResult(
            title=optional_text(raw.get("display_name")) or optional_text(raw.get("title")) or UNTITLED,
            authors=normalize_authors(raw.get("authorships")),
            year=normalize_date(raw.get("publication_year")),
            source=self.source_name,
            abstract=rebuild_abstract(raw.get("abstract_inverted_index")),
            citation_count=normalize_count(raw.get("cited_by_count")),
            pdf_link=pdf_link,
            doi=strip_doi_prefix(raw.get("doi")),
        )

# clients/openalex_client.py
from typing import Dict, List, Optional, TypedDict

import requests

from clients.errors import ProviderError
from clients.http_utils import get_with_deadline

OPENALEX_WORKS_URL = "https://api.openalex.org/works"
OPENALEX_MAX_PER_PAGE = 200


class OpenAlexAuthor(TypedDict, total=False):
    id: Optional[str]
    display_name: Optional[str]


class OpenAlexAuthorship(TypedDict, total=False):
    author_position: Optional[str]
    author: OpenAlexAuthor


class OpenAlexOpenAccess(TypedDict, total=False):
    is_oa: bool
    oa_url: Optional[str]


class OpenAlexLocation(TypedDict, total=False):
    pdf_url: Optional[str]
    landing_page_url: Optional[str]


class OpenAlexWork(TypedDict, total=False):
    id: str
    doi: Optional[str]
    title: Optional[str]
    display_name: Optional[str]
    publication_year: Optional[int]
    cited_by_count: Optional[int]
    authorships: List[OpenAlexAuthorship]
    open_access: Optional[OpenAlexOpenAccess]
    best_oa_location: Optional[OpenAlexLocation]
    abstract_inverted_index: Optional[Dict[str, List[int]]]


def search_openalex(
    query: str,
    limit: int,
    email: Optional[str] = None,
    timeout: float = 6.0,
) -> List[OpenAlexWork]:
    params = {
        "search": query,
        "per-page": min(limit, OPENALEX_MAX_PER_PAGE),
    }
    # Polite pool: identified callers get better rate limits
    if email:
        params["mailto"] = email

    resp = get_with_deadline(OPENALEX_WORKS_URL, params=params, timeout=timeout)
    resp.raise_for_status()

    data = resp.json()
    if not isinstance(data, dict):
        raise ProviderError("OpenAlex", "response is not a JSON object")

    results = data.get("results") or []
    if not isinstance(results, list):
        raise ProviderError("OpenAlex", "'results' is not a list")

    return results

# clients/core_client.py
import logging
from typing import List, Optional, TypedDict

import requests

from clients.errors import ProviderError
from clients.http_utils import get_with_deadline

logger = logging.getLogger(__name__)

CORE_SEARCH_URL = "https://api.core.ac.uk/v3/search/works"
CORE_MAX_LIMIT = 100


class CoreAuthor(TypedDict, total=False):
    name: Optional[str]


class CoreWork(TypedDict, total=False):
    id: int
    title: Optional[str]
    authors: List[CoreAuthor]
    abstract: Optional[str]
    yearPublished: Optional[int]
    publishedDate: Optional[str]
    citationCount: Optional[int]
    downloadUrl: Optional[str]
    doi: Optional[str]


def search_core(
    query: str,
    limit: int,
    api_key: str,
    timeout: float = 6.0,
) -> List[CoreWork]:
    params = {
        "q": query,
        "limit": min(limit, CORE_MAX_LIMIT),
    }
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Accept": "application/json",
    }

    resp = get_with_deadline(CORE_SEARCH_URL, params=params, headers=headers, timeout=timeout)
    if resp.status_code == 401:
        logger.error("CORE API: Unauthorized - check CORE_API_KEY")
    resp.raise_for_status()

    data = resp.json()
    if not isinstance(data, dict):
        raise ProviderError("CORE", "response is not a JSON object")

    results = data.get("results") or []
    if not isinstance(results, list):
        raise ProviderError("CORE", "'results' is not a list")

    return results

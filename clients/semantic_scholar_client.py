# clients/semantic_scholar_client.py
import logging
import random
import time
from typing import Dict, List, Optional, TypedDict

import requests

from clients.errors import ProviderError
from clients.http_utils import get_with_deadline

logger = logging.getLogger(__name__)

S2_API_URL = "https://api.semanticscholar.org/graph/v1/paper/search"
S2_FIELDS = [
    "title",
    "authors",
    "year",
    "abstract",
    "citationCount",
    "openAccessPdf",
    "externalIds",
]
S2_MAX_LIMIT = 100

MAX_RETRIES = 1
BASE_DELAY = 1
MAX_RETRY_WAIT = 2


class S2Author(TypedDict, total=False):
    authorId: Optional[str]
    name: Optional[str]


class S2OpenAccessPdf(TypedDict, total=False):
    url: Optional[str]
    status: Optional[str]


class S2Paper(TypedDict, total=False):
    paperId: str
    title: Optional[str]
    authors: List[S2Author]
    year: Optional[int]
    abstract: Optional[str]
    citationCount: Optional[int]
    openAccessPdf: Optional[S2OpenAccessPdf]
    externalIds: Optional[Dict[str, str]]


def _retry_wait(resp: requests.Response, attempt: int) -> float:
    try:
        wait_time = float(resp.headers.get("Retry-After", BASE_DELAY * (2 ** attempt)))
    except ValueError:
        wait_time = BASE_DELAY * (2 ** attempt)
    # Cap wait time so the adapter stays inside its timeout
    return min(wait_time, MAX_RETRY_WAIT) + random.uniform(0, 0.5)


def search_semantic_scholar(
    query: str,
    limit: int,
    api_key: str,
    timeout: float = 6.0,
) -> List[S2Paper]:
    params = {
        "query": query,
        "limit": min(limit, S2_MAX_LIMIT),
        "fields": ",".join(S2_FIELDS),
    }
    headers = {"x-api-key": api_key}

    for attempt in range(MAX_RETRIES + 1):
        resp = get_with_deadline(S2_API_URL, params=params, headers=headers, timeout=timeout)

        if resp.status_code == 429 and attempt < MAX_RETRIES:
            wait_time = _retry_wait(resp, attempt)
            logger.warning(f"⚠️ S2 Rate Limit (429). Retrying in {wait_time:.2f}s... (Attempt {attempt+1}/{MAX_RETRIES})")
            time.sleep(wait_time)
            continue

        resp.raise_for_status()
        break

    data = resp.json()
    if not isinstance(data, dict):
        raise ProviderError("Semantic Scholar", "response is not a JSON object")

    results = data.get("data") or []
    if not isinstance(results, list):
        raise ProviderError("Semantic Scholar", "'data' is not a list")

    return results

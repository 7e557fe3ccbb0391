# clients/pubmed_client.py
import logging
from typing import Dict, List, Optional, TypedDict

import requests

from clients.errors import ProviderError
from clients.http_utils import get_with_deadline

logger = logging.getLogger(__name__)

EUTILS_BASE = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
ESEARCH_URL = f"{EUTILS_BASE}/esearch.fcgi"
ESUMMARY_URL = f"{EUTILS_BASE}/esummary.fcgi"


class PubMedAuthor(TypedDict, total=False):
    name: Optional[str]
    authtype: Optional[str]


class PubMedArticleId(TypedDict, total=False):
    idtype: str
    value: str


class PubMedSummary(TypedDict, total=False):
    uid: str
    title: Optional[str]
    authors: List[PubMedAuthor]
    pubdate: Optional[str]
    sortpubdate: Optional[str]
    source: Optional[str]
    articleids: List[PubMedArticleId]


def _base_params(api_key: Optional[str]) -> Dict[str, str]:
    params = {"db": "pubmed", "retmode": "json"}
    if api_key:
        params["api_key"] = api_key
    return params


def esearch_pubmed(query: str, retmax: int, api_key: Optional[str] = None, timeout: float = 6.0) -> List[str]:
    params = {**_base_params(api_key), "term": query, "retmax": retmax}

    resp = get_with_deadline(ESEARCH_URL, params=params, timeout=timeout)
    resp.raise_for_status()

    data = resp.json()
    result = data.get("esearchresult") if isinstance(data, dict) else None
    if not isinstance(result, dict):
        raise ProviderError("PubMed", "esearch response has no 'esearchresult'")

    id_list = result.get("idlist") or []
    if not isinstance(id_list, list):
        raise ProviderError("PubMed", "'idlist' is not a list")

    return [str(pmid) for pmid in id_list]


def esummary_pubmed(pmids: List[str], api_key: Optional[str] = None, timeout: float = 6.0) -> List[PubMedSummary]:
    params = {**_base_params(api_key), "id": ",".join(pmids)}

    resp = get_with_deadline(ESUMMARY_URL, params=params, timeout=timeout)
    resp.raise_for_status()

    data = resp.json()
    result = data.get("result") if isinstance(data, dict) else None
    if not isinstance(result, dict):
        raise ProviderError("PubMed", "esummary response has no 'result'")

    # Keep esearch relevance order; 'uids' repeats it but is not always present
    summaries: List[PubMedSummary] = []
    for pmid in pmids:
        record = result.get(pmid)
        if isinstance(record, dict) and not record.get("error"):
            summaries.append(record)

    return summaries


def search_pubmed(query: str, limit: int, api_key: Optional[str] = None, timeout: float = 6.0) -> List[PubMedSummary]:
    """
    Two-step E-utilities search: esearch for PMIDs, then esummary for them.
    No ids means no second request.
    """
    pmids = esearch_pubmed(query, limit, api_key=api_key, timeout=timeout)
    if not pmids:
        logger.info("PubMed esearch returned no ids")
        return []

    return esummary_pubmed(pmids, api_key=api_key, timeout=timeout)

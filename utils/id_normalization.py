# utils/id_normalization.py
import re
from typing import Optional

DOI_PREFIXES = (
    "https://doi.org/",
    "http://doi.org/",
    "https://dx.doi.org/",
    "http://dx.doi.org/",
    "doi:",
)

ARXIV_DOI_PREFIX = "10.48550/arXiv."
NO_YEAR_TOKEN = "noyear"

_ARXIV_VERSION = re.compile(r"v\d+$")
_NON_WORD = re.compile(r"[^\w\s]|_", re.UNICODE)


def strip_doi_prefix(raw_doi: Optional[str]) -> Optional[str]:
    """
    Removes resolver URL / scheme prefixes, keeping the DOI's case.
    Returns None for empty input.
    """
    if not raw_doi or not isinstance(raw_doi, str):
        return None

    doi = raw_doi.strip()
    lowered = doi.lower()
    for prefix in DOI_PREFIXES:
        if lowered.startswith(prefix):
            doi = doi[len(prefix):].strip()
            break

    return doi or None


def normalize_doi(raw_doi: Optional[str]) -> Optional[str]:
    doi = strip_doi_prefix(raw_doi)
    return doi.lower() if doi else None


def normalize_arxiv_id(raw_id: Optional[str]) -> Optional[str]:
    """
    'http://arxiv.org/abs/2101.00001v2' -> '2101.00001'
    'http://arxiv.org/abs/hep-th/9901001v1' -> 'hep-th/9901001'
    """
    if not raw_id or not raw_id.strip():
        return None

    raw_id = raw_id.strip()
    if "/abs/" in raw_id:
        identifier = raw_id.split("/abs/", 1)[1]
    else:
        identifier = raw_id.rsplit("/", 1)[-1]

    identifier = _ARXIV_VERSION.sub("", identifier.strip("/"))
    return identifier or None


def arxiv_doi_from_link(raw_id: Optional[str]) -> Optional[str]:
    arxiv_id = normalize_arxiv_id(raw_id)
    return f"{ARXIV_DOI_PREFIX}{arxiv_id}" if arxiv_id else None


def normalize_title(title: Optional[str]) -> str:
    """Lower-cased title with punctuation removed and whitespace collapsed."""
    if not title:
        return ""
    text = _NON_WORD.sub("", title.lower())
    return " ".join(text.split())


def build_identity_key(doi: Optional[str], title: Optional[str], year: Optional[int]) -> str:
    """
    Key deciding whether two records describe the same paper.

    DOI wins when present. Otherwise normalized title + year; a title
    match across differing (or missing) years is not a match.
    """
    clean_doi = normalize_doi(doi)
    if clean_doi:
        return f"doi:{clean_doi}"

    year_token = str(year) if year is not None else NO_YEAR_TOKEN
    return f"{normalize_title(title)}_{year_token}"

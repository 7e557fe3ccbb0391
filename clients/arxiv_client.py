# clients/arxiv_client.py
from typing import List, Optional, TypedDict

import requests
from defusedxml import ElementTree as ET

from clients.errors import ProviderError
from clients.http_utils import get_with_deadline

ARXIV_API_URL = "https://export.arxiv.org/api/query"
ATOM_NS = "{http://www.w3.org/2005/Atom}"
ARXIV_NS = "{http://arxiv.org/schemas/atom}"


class ArxivEntry(TypedDict):
    id: Optional[str]
    title: Optional[str]
    summary: Optional[str]
    authors: List[str]
    published: Optional[str]
    pdf_url: Optional[str]
    doi: Optional[str]


def _text(entry, tag: str) -> Optional[str]:
    elem = entry.find(tag)
    if elem is None or not elem.text:
        return None
    return " ".join(elem.text.split()) or None


def parse_arxiv_feed(xml_text: str) -> List[ArxivEntry]:
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise ProviderError("arXiv", f"invalid Atom feed: {e}") from e

    if root.tag != f"{ATOM_NS}feed":
        raise ProviderError("arXiv", f"unexpected root element {root.tag}")

    entries: List[ArxivEntry] = []
    for entry in root.findall(f"{ATOM_NS}entry"):
        # Extract PDF link
        pdf_url = None
        for link in entry.findall(f"{ATOM_NS}link"):
            if link.get("title") == "pdf" or link.get("type") == "application/pdf":
                pdf_url = link.get("href")
                break

        # Authors
        authors = [
            name.text.strip()
            for a in entry.findall(f"{ATOM_NS}author")
            if (name := a.find(f"{ATOM_NS}name")) is not None and name.text
        ]

        entries.append({
            "id": _text(entry, f"{ATOM_NS}id"),
            "title": _text(entry, f"{ATOM_NS}title"),
            "summary": _text(entry, f"{ATOM_NS}summary"),
            "authors": authors,
            "published": _text(entry, f"{ATOM_NS}published"),
            "pdf_url": pdf_url,
            "doi": _text(entry, f"{ARXIV_NS}doi"),
        })

    return entries


def search_arxiv(query: str, max_results: int, timeout: float = 6.0) -> List[ArxivEntry]:
    params = {
        "search_query": f"all:{query}",
        "start": 0,
        "max_results": max_results,
    }

    response = get_with_deadline(ARXIV_API_URL, params=params, timeout=timeout)
    response.raise_for_status()

    return parse_arxiv_feed(response.text)

#File: services/data_normalization_service.py
import math
import re
from datetime import datetime
from typing import List, Any, Optional

NAME_KEYS = ("name", "display_name", "full_name")


def normalize_date(date_str: Any) -> Optional[int]:
    """
    Extracts a 4-digit year from various date formats.
    Supports: YYYY, YYYY-MM-DD, ISO Strings, "2021 Mar 5".
    Returns: Year as Integer or None.
    """
    if date_str is None or isinstance(date_str, bool):
        return None

    if isinstance(date_str, int):
        return date_str if date_str >= 0 else None

    date_str = str(date_str).strip()
    if not date_str:
        return None

    # 1. Exact 4-digit year
    if re.match(r"^\d{4}$", date_str):
        return int(date_str)

    # 2. ISO / standard date starting with YYYY
    match = re.search(r"(\d{4})-\d{2}-\d{2}", date_str)
    if match:
        return int(match.group(1))

    # 3. Try standard datetime parsing
    try:
        # Arxiv returns '2023-10-15T12:00:00Z'
        dt = datetime.fromisoformat(date_str.replace("Z", "+00:00"))
        return dt.year
    except ValueError:
        pass

    # 4. Fallback: first plausible year (1900 - 2099) anywhere in the string
    match = re.search(r"\b((?:19|20)\d{2})\b", date_str)
    if match:
        return int(match.group(1))

    return None


def normalize_count(value: Any) -> Optional[int]:
    """Non-negative integer or None. Numeric strings are accepted."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, float):
        if not math.isfinite(value) or value < 0:
            return None
        return int(value)

    try:
        count = int(value)
    except (TypeError, ValueError):
        return None

    return count if count >= 0 else None


def _author_name(author: Any) -> Optional[str]:
    if isinstance(author, str):
        return author.strip() or None

    if isinstance(author, dict):
        for key in NAME_KEYS:
            name = author.get(key)
            if isinstance(name, str) and name.strip():
                return name.strip()
        # OpenAlex authorship: {'author': {'display_name': ...}}
        nested = author.get("author")
        if isinstance(nested, dict):
            return _author_name(nested)

    return None


def normalize_authors(authors: Any) -> List[str]:
    """
    Standardizes author list to simple list of strings.
    Handles: strings, list of strings, list of (possibly nested) name objects.
    """
    if not authors:
        return []

    if isinstance(authors, str):
        # Handle comma-separated list of authors
        return [a.strip() for a in authors.split(",") if a.strip()]

    normalized = []
    if isinstance(authors, list):
        for a in authors:
            name = _author_name(a)
            if name:
                normalized.append(" ".join(name.split()))

    return normalized

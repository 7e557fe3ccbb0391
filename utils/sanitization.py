# utils/sanitization.py
from typing import Any, Optional
import re

CONTROL_CHARS = r"[\x00-\x08\x0b-\x0c\x0e-\x1f\x7f-\x9f]"


def clean_text(value: Optional[str]) -> str:
    if value is None:
        return ""

    text = re.sub(CONTROL_CHARS, "", str(value))
    text = text.strip()

    # Provider titles and abstracts often carry hard line breaks
    text = re.sub(r"\s+", " ", text)

    return text


def optional_text(value: Any) -> Optional[str]:
    """Cleaned text, or None when nothing is left."""
    if value is None or not isinstance(value, str):
        return None
    text = clean_text(value)
    return text or None

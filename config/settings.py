# File: config/settings.py
"""Runtime configuration for the search service."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_ADAPTER_TIMEOUT = 8.0
DEFAULT_REQUEST_TIMEOUT = 6.0
DEFAULT_RATE_LIMIT = 60


def _env_str(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _env_number(name: str, default, cast):
    raw = _env_str(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


@dataclass
class SearchSettings:
    semantic_scholar_api_key: Optional[str] = None
    core_api_key: Optional[str] = None
    ncbi_api_key: Optional[str] = None
    openalex_email: Optional[str] = None

    # Upper bound for one adapter, all of its HTTP calls included
    adapter_timeout: float = DEFAULT_ADAPTER_TIMEOUT
    # Per HTTP request (connect + read)
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    rate_limit_per_minute: int = DEFAULT_RATE_LIMIT
    app_env: str = "local"
    allowed_origins: List[str] = field(default_factory=list)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "SearchSettings":
        origins_str = os.getenv("ALLOWED_ORIGINS", "")
        return cls(
            semantic_scholar_api_key=_env_str("SEMANTIC_SCHOLAR_API_KEY"),
            core_api_key=_env_str("CORE_API_KEY"),
            ncbi_api_key=_env_str("NCBI_API_KEY"),
            openalex_email=_env_str("OPENALEX_EMAIL"),
            adapter_timeout=_env_number("SEARCH_ADAPTER_TIMEOUT", DEFAULT_ADAPTER_TIMEOUT, float),
            request_timeout=_env_number("SEARCH_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT, float),
            rate_limit_per_minute=_env_number("RATE_LIMIT_PER_MINUTE", DEFAULT_RATE_LIMIT, int),
            app_env=_env_str("APP_ENV") or "local",
            allowed_origins=[o.strip() for o in origins_str.split(",") if o.strip()],
            log_level=(_env_str("LOG_LEVEL") or "INFO").upper(),
        )

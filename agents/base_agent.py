# agents/base_agent.py
import asyncio
import logging
from typing import Any, List, Optional

from services.schema.paper_schema import UnifiedPaperResult

logger = logging.getLogger(__name__)


class SourceAgent:
    """
    Adapter for one academic search provider.

    Subclasses implement `_search` (blocking HTTP call returning the
    provider's raw records) and `_normalize` (one raw record -> unified
    record). `fetch` never raises: any failure is logged and yields [].
    """

    source_name: str = ""
    requires_api_key: bool = False

    def __init__(self, api_key: Optional[str] = None, request_timeout: float = 6.0):
        self.api_key = api_key
        self.request_timeout = request_timeout

    def _redact(self, error: Exception) -> str:
        # HTTPError messages carry the request URL, key included for some providers
        message = str(error)
        if self.api_key:
            message = message.replace(self.api_key, "***")
        return message

    def _search(self, query: str, limit: int) -> List[Any]:
        raise NotImplementedError

    def _normalize(self, raw: Any) -> UnifiedPaperResult:
        raise NotImplementedError

    async def fetch(self, query: str, limit: int) -> List[UnifiedPaperResult]:
        if self.requires_api_key and not self.api_key:
            logger.warning(f"🔒 {self.source_name}: no API key configured, skipping")
            return []

        logger.info(f"📡 {self.source_name}: searching for '{query}' (limit={limit})")

        try:
            raw_results = await asyncio.to_thread(self._search, query, limit)
            papers = [self._normalize(raw) for raw in raw_results]
        except Exception as e:
            logger.error(f"❌ {self.source_name} search failed: {self._redact(e)}")
            return []

        logger.info(f"📚 {self.source_name} returned {len(papers)} papers")
        return papers

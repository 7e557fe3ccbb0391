# agents/data_acquisition_agent.py
import asyncio
import logging
import math
from typing import List, Optional, Sequence

from agents.arxiv_agent import ArxivAgent
from agents.base_agent import SourceAgent
from agents.core_agent import CoreAgent
from agents.openalex_agent import OpenAlexAgent
from agents.pubmed_agent import PubMedAgent
from agents.semantic_scholar_agent import SemanticScholarAgent
from config.settings import DEFAULT_ADAPTER_TIMEOUT, SearchSettings
from services.schema.paper_schema import UnifiedPaperResult

logger = logging.getLogger(__name__)

MIN_PER_SOURCE_LIMIT = 10
# Ask each source for more than its share; dedup eats some of it
OVERFETCH_FACTOR = 2


def per_source_limit(effective_limit: int, source_count: int) -> int:
    if source_count <= 0:
        return MIN_PER_SOURCE_LIMIT
    share = math.ceil(effective_limit * OVERFETCH_FACTOR / source_count)
    return max(MIN_PER_SOURCE_LIMIT, share)


def build_source_agents(settings: SearchSettings) -> List[SourceAgent]:
    """
    Fresh adapters for one request, in the order their results are merged.
    """
    timeout = settings.request_timeout
    return [
        SemanticScholarAgent(api_key=settings.semantic_scholar_api_key, request_timeout=timeout),
        OpenAlexAgent(email=settings.openalex_email, request_timeout=timeout),
        ArxivAgent(request_timeout=timeout),
        CoreAgent(api_key=settings.core_api_key, request_timeout=timeout),
        PubMedAgent(api_key=settings.ncbi_api_key, request_timeout=timeout),
    ]


class DataAcquisitionAgent:
    def __init__(self, agents: Sequence[SourceAgent], adapter_timeout: Optional[float] = DEFAULT_ADAPTER_TIMEOUT):
        self.agents = list(agents)
        self.adapter_timeout = adapter_timeout

    @classmethod
    def from_settings(cls, settings: SearchSettings) -> "DataAcquisitionAgent":
        return cls(build_source_agents(settings), adapter_timeout=settings.adapter_timeout)

    async def _fetch_one(self, agent: SourceAgent, query: str, limit: int) -> List[UnifiedPaperResult]:
        # wait_for only stops waiting; the worker thread ends at its HTTP call's total deadline
        return await asyncio.wait_for(agent.fetch(query, limit), timeout=self.adapter_timeout)

    async def run(self, query: str, effective_limit: int) -> List[UnifiedPaperResult]:
        """
        Query every source concurrently and concatenate what comes back,
        in source order. A source that fails or times out adds nothing.
        """
        limit = per_source_limit(effective_limit, len(self.agents))
        logger.info(f"🌐 DataAcquisitionAgent → '{query}' across {len(self.agents)} sources ({limit} each)")

        outcomes = await asyncio.gather(
            *(self._fetch_one(agent, query, limit) for agent in self.agents),
            return_exceptions=True,
        )

        combined: List[UnifiedPaperResult] = []
        for agent, outcome in zip(self.agents, outcomes):
            name = getattr(agent, "source_name", type(agent).__name__)
            if isinstance(outcome, asyncio.TimeoutError):
                logger.error(f"⏱️ {name} timed out after {self.adapter_timeout}s")
                continue
            if isinstance(outcome, Exception):
                logger.error(f"❌ {name} failed: {outcome!r}")
                continue
            if isinstance(outcome, BaseException):
                raise outcome
            combined.extend(outcome)

        logger.info(f"📥 Total papers fetched (before merge): {len(combined)}")
        return combined

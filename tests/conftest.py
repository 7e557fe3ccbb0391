# tests/conftest.py
import asyncio
from typing import List, Optional

import pytest

from agents.base_agent import SourceAgent
from services.schema.paper_schema import UnifiedPaperResult


def make_paper(title="A Paper", source="Semantic Scholar", **fields) -> UnifiedPaperResult:
    return UnifiedPaperResult(title=title, source=source, **fields)


class StaticAgent(SourceAgent):
    """Source that returns canned records through the real fetch path."""

    def __init__(self, name: str, papers: Optional[List[UnifiedPaperResult]] = None, error: Optional[Exception] = None):
        super().__init__()
        self.source_name = name
        self.papers = papers or []
        self.error = error
        self.calls = []

    def _search(self, query, limit):
        self.calls.append((query, limit))
        if self.error is not None:
            raise self.error
        return list(self.papers)

    def _normalize(self, raw):
        return raw


class RaisingAgent:
    """Bypasses SourceAgent's own isolation to prove the aggregator's."""

    def __init__(self, name: str, error: Exception):
        self.source_name = name
        self.error = error
        self.calls = 0

    async def fetch(self, query, limit):
        self.calls += 1
        raise self.error


class SlowAgent:
    def __init__(self, name: str, delay: float = 5.0):
        self.source_name = name
        self.delay = delay

    async def fetch(self, query, limit):
        await asyncio.sleep(self.delay)
        return [make_paper(title="Too late", source=self.source_name)]


@pytest.fixture
def paper_factory():
    return make_paper


@pytest.fixture
def static_agent():
    return StaticAgent


@pytest.fixture
def raising_agent():
    return RaisingAgent


@pytest.fixture
def slow_agent():
    return SlowAgent

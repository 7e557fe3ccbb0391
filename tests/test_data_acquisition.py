# tests/test_data_acquisition.py
import pytest
import requests

from agents.arxiv_agent import ArxivAgent
from agents.core_agent import CoreAgent
from agents.data_acquisition_agent import (
    MIN_PER_SOURCE_LIMIT,
    DataAcquisitionAgent,
    build_source_agents,
    per_source_limit,
)
from agents.openalex_agent import OpenAlexAgent
from agents.pubmed_agent import PubMedAgent
from agents.semantic_scholar_agent import SemanticScholarAgent
from config.settings import SearchSettings


def test_per_source_limit_overfetches_with_floor():
    assert per_source_limit(50, 5) == 20
    assert per_source_limit(1, 5) == MIN_PER_SOURCE_LIMIT
    assert per_source_limit(24, 5) == 10
    assert per_source_limit(30, 5) == 12
    assert per_source_limit(10, 0) == MIN_PER_SOURCE_LIMIT


def test_build_source_agents_order_and_config():
    settings = SearchSettings(
        semantic_scholar_api_key="s2",
        core_api_key="core",
        ncbi_api_key="ncbi",
        openalex_email="me@example.org",
        request_timeout=4.0,
    )
    agents = build_source_agents(settings)

    assert [type(a) for a in agents] == [SemanticScholarAgent, OpenAlexAgent, ArxivAgent, CoreAgent, PubMedAgent]
    assert [a.source_name for a in agents] == ["Semantic Scholar", "OpenAlex", "arXiv", "CORE", "PubMed"]
    assert agents[0].api_key == "s2"
    assert agents[1].email == "me@example.org"
    assert agents[3].api_key == "core"
    assert agents[4].api_key == "ncbi"
    assert all(a.request_timeout == 4.0 for a in agents)


def test_from_settings_uses_adapter_timeout():
    agent = DataAcquisitionAgent.from_settings(SearchSettings(adapter_timeout=3.5))
    assert agent.adapter_timeout == 3.5
    assert len(agent.agents) == 5


@pytest.mark.asyncio
async def test_results_concatenated_in_source_order(static_agent, paper_factory):
    first = static_agent("Semantic Scholar", [paper_factory("A"), paper_factory("B")])
    second = static_agent("OpenAlex", [paper_factory("C", source="OpenAlex")])

    papers = await DataAcquisitionAgent([first, second]).run("caffeine", 10)

    assert [p.title for p in papers] == ["A", "B", "C"]
    assert first.calls == [("caffeine", 10)]
    assert second.calls == [("caffeine", 10)]


@pytest.mark.asyncio
async def test_one_raising_source_does_not_sink_the_rest(static_agent, raising_agent, paper_factory):
    agents = [
        static_agent("Semantic Scholar", [paper_factory("S2")]),
        static_agent("OpenAlex", [paper_factory("OA", source="OpenAlex")]),
        raising_agent("arXiv", RuntimeError("exploded")),
        static_agent("CORE", [paper_factory("CORE", source="CORE")]),
        static_agent("PubMed", [paper_factory("PM", source="PubMed")]),
    ]

    papers = await DataAcquisitionAgent(agents).run("q", 10)

    assert [p.title for p in papers] == ["S2", "OA", "CORE", "PM"]
    assert agents[2].calls == 1


@pytest.mark.asyncio
async def test_slow_source_times_out(static_agent, slow_agent, paper_factory):
    agents = [
        slow_agent("Semantic Scholar", delay=5.0),
        static_agent("OpenAlex", [paper_factory("OA", source="OpenAlex")]),
    ]

    papers = await DataAcquisitionAgent(agents, adapter_timeout=0.05).run("q", 10)

    assert [p.title for p in papers] == ["OA"]


@pytest.mark.asyncio
async def test_network_failures_contribute_nothing(static_agent, paper_factory):
    agents = [
        static_agent("Semantic Scholar", [paper_factory("S2")]),
        static_agent("CORE", error=requests.ConnectionError("down")),
        static_agent("PubMed", error=requests.Timeout("slow")),
    ]

    papers = await DataAcquisitionAgent(agents).run("q", 10)

    assert [p.source for p in papers] == ["Semantic Scholar"]


@pytest.mark.asyncio
async def test_all_sources_empty(static_agent):
    agents = [static_agent("Semantic Scholar"), static_agent("OpenAlex")]
    assert await DataAcquisitionAgent(agents).run("q", 10) == []

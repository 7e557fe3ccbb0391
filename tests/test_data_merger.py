# tests/test_data_merger.py
from agents.data_merger_agent import DataMergerAgent, identity_key


def test_doi_duplicates_merge_missing_fields(paper_factory):
    s2 = paper_factory("Caffeine and Memory", source="Semantic Scholar", doi="10.1/X", year=2020, citation_count=12)
    oa = paper_factory(
        "Caffeine & memory", source="OpenAlex", doi="10.1/x", year=2021,
        abstract="From OpenAlex", citation_count=99, pdf_link="https://example.org/x.pdf",
    )

    merged = DataMergerAgent().merge([s2, oa])

    assert len(merged) == 1
    kept = merged[0]
    assert kept.source == "Semantic Scholar"
    assert kept.title == "Caffeine and Memory"
    assert kept.year == 2020
    assert kept.doi == "10.1/X"
    assert kept.abstract == "From OpenAlex"
    assert kept.pdf_link == "https://example.org/x.pdf"
    # present in both: first-seen value stays
    assert kept.citation_count == 12


def test_merge_fills_whichever_side_has_the_abstract(paper_factory):
    with_abstract = paper_factory("T", doi="10.2/y", abstract="Present")
    without = paper_factory("T", source="OpenAlex", doi="10.2/y")

    forward = DataMergerAgent().merge([with_abstract.model_copy(), without.model_copy()])
    backward = DataMergerAgent().merge([without.model_copy(), with_abstract.model_copy()])

    assert forward[0].abstract == "Present"
    assert backward[0].abstract == "Present"


def test_title_year_key_without_doi(paper_factory):
    a = paper_factory("Deep Learning!", year=2019, authors=["A"])
    b = paper_factory("deep learning", source="CORE", year=2019, authors=["B"], citation_count=4)

    merged = DataMergerAgent().merge([a, b])

    assert len(merged) == 1
    assert merged[0].authors == ["A"]
    assert merged[0].citation_count == 4


def test_missing_year_is_a_different_paper(paper_factory):
    dated = paper_factory("Title", year=2020)
    undated = paper_factory("Title", source="PubMed")

    assert identity_key(dated) == "title_2020"
    assert identity_key(undated) == "title_noyear"
    assert len(DataMergerAgent().merge([dated, undated])) == 2


def test_doi_and_title_keys_do_not_cross(paper_factory):
    with_doi = paper_factory("Same Title", year=2020, doi="10.3/z")
    without_doi = paper_factory("Same Title", source="PubMed", year=2020)

    assert len(DataMergerAgent().merge([with_doi, without_doi])) == 2


def test_merge_is_idempotent(paper_factory):
    papers = [
        paper_factory("A", doi="10.1/a"),
        paper_factory("A", source="OpenAlex", doi="10.1/A", abstract="x"),
        paper_factory("B", year=2001),
        paper_factory("B.", source="arXiv", year=2001, pdf_link="p"),
        paper_factory("C"),
    ]
    merger = DataMergerAgent()

    once = merger.merge(papers)
    snapshot = [p.model_dump() for p in once]
    twice = merger.merge(once)

    assert len(once) == 3
    assert [p.model_dump() for p in twice] == snapshot


def test_merge_empty():
    assert DataMergerAgent().merge([]) == []

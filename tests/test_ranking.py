# tests/test_ranking.py
import random

from services.ranking_service import rank_papers


def test_citations_then_year_then_title(paper_factory):
    papers = [
        paper_factory("Zeta", citation_count=5, year=2020),
        paper_factory("Alpha", citation_count=5, year=2020),
        paper_factory("Newer", citation_count=5, year=2022),
        paper_factory("Most cited", citation_count=100, year=1999),
        paper_factory("Zero cites", citation_count=0, year=2024),
        paper_factory("Unknown cites", year=2025),
        paper_factory("Unknown both"),
    ]

    ranked = rank_papers(papers)

    assert [p.title for p in ranked] == [
        "Most cited", "Newer", "Alpha", "Zeta", "Zero cites", "Unknown cites", "Unknown both",
    ]


def test_unknown_year_sorts_as_oldest(paper_factory):
    ranked = rank_papers([
        paper_factory("No year", citation_count=1),
        paper_factory("Ancient", citation_count=1, year=1901),
    ])
    assert [p.title for p in ranked] == ["Ancient", "No year"]


def test_truncates_to_limit(paper_factory):
    papers = [paper_factory(f"P{i}", citation_count=i) for i in range(10)]

    ranked = rank_papers(papers, limit=3)

    assert [p.citation_count for p in ranked] == [9, 8, 7]


def test_order_is_total_and_reproducible(paper_factory):
    rng = random.Random(7)
    papers = [
        paper_factory(
            f"Paper {rng.randint(0, 5)}",
            citation_count=rng.choice([None, 0, 1, 2]),
            year=rng.choice([None, 2019, 2020]),
        )
        for _ in range(40)
    ]
    shuffled = papers[:]
    rng.shuffle(shuffled)

    ranked = rank_papers(papers)
    assert [p.model_dump() for p in rank_papers(shuffled)] == [p.model_dump() for p in ranked]

    for x, y in zip(ranked, ranked[1:]):
        cx = x.citation_count if x.citation_count is not None else -1
        cy = y.citation_count if y.citation_count is not None else -1
        yx = x.year or 0
        yy = y.year or 0
        assert cx > cy or (cx == cy and (yx > yy or (yx == yy and x.title <= y.title)))

"""Tests for the global score and time rankings."""

import pytest

from linkshare.core.errors import InvalidPageError
from linkshare.services.scoring import Order, ScoreEngine

VOTE_SCORE = 432


@pytest.fixture
def engine(store) -> ScoreEngine:
    return ScoreEngine(store, vote_score=VOTE_SCORE)


def test_seed_article_gives_one_vote_head_start(engine: ScoreEngine) -> None:
    engine.seed_article(1, 1000)
    assert engine.created_at_of(1) == 1000
    assert engine.score_of(1) == 1000 + VOTE_SCORE


def test_bump_score(engine: ScoreEngine) -> None:
    engine.seed_article(1, 1000)
    engine.bump_score(1, VOTE_SCORE)
    assert engine.score_of(1) == 1000 + 2 * VOTE_SCORE
    assert engine.created_at_of(1) == 1000


def test_page_by_score_is_non_increasing(engine: ScoreEngine) -> None:
    for article_id, created_at in enumerate([100, 5000, 300, 2000], start=1):
        engine.seed_article(article_id, created_at)
    engine.bump_score(3, 10 * VOTE_SCORE)

    ids = engine.page_by_score(1, 10)
    scores = [engine.score_of(article_id) for article_id in ids]
    assert ids == [2, 3, 4, 1]
    assert scores == sorted(scores, reverse=True)


def test_page_by_time_is_newest_first(engine: ScoreEngine) -> None:
    for article_id, created_at in enumerate([100, 5000, 300], start=1):
        engine.seed_article(article_id, created_at)
    engine.bump_score(1, 100 * VOTE_SCORE)

    assert engine.page_by_time(1, 10) == [2, 3, 1]


def test_pages_concatenate_to_full_read(engine: ScoreEngine) -> None:
    for article_id in range(1, 12):
        engine.seed_article(article_id, article_id * 100)

    pages = []
    for page in range(1, 5):
        pages.extend(engine.page_by_score(page, 3))
    assert pages == engine.page_by_score(1, 100)
    assert len(pages) == 11


def test_out_of_range_page_is_empty(engine: ScoreEngine) -> None:
    engine.seed_article(1, 100)
    assert engine.page_by_score(3, 25) == []
    assert engine.page(Order.TIME.key, 1, 25) == [1]


@pytest.mark.parametrize("page, page_size", [(0, 25), (-1, 25), (1, 0)])
def test_invalid_page_raises(engine: ScoreEngine, page: int, page_size: int) -> None:
    with pytest.raises(InvalidPageError):
        engine.page_by_score(page, page_size)


def test_order_keys() -> None:
    assert Order.SCORE.key == "score:"
    assert Order.TIME.key == "time:"
    assert Order("time") is Order.TIME

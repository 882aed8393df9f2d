"""Tests for the vote ledger."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from linkshare.core.errors import ArticleNotFoundError
from linkshare.services.articles import ArticleRepository
from linkshare.services.scoring import ScoreEngine
from linkshare.services.votes import VoteLedger, VoteOutcome

WEEK = 7 * 86400
VOTE_SCORE = 432


@pytest.fixture
def scores(store) -> ScoreEngine:
    return ScoreEngine(store, vote_score=VOTE_SCORE)


@pytest.fixture
def repo(store) -> ArticleRepository:
    return ArticleRepository(store)


@pytest.fixture
def ledger(store, scores, repo) -> VoteLedger:
    return VoteLedger(store, scores, repo, window_seconds=WEEK)


@pytest.fixture
def article(repo, scores, ledger, clock):
    now = int(clock())
    article = repo.create_article("alice", "A", "https://a.example", now=now)
    scores.seed_article(article.id, now)
    ledger.register_author_as_voted(article.id, "alice")
    return article


def _assert_score_matches_votes(scores: ScoreEngine, repo: ArticleRepository, article_id: int) -> None:
    stored = repo.get_article(article_id)
    assert scores.score_of(article_id) == stored.time + VOTE_SCORE * stored.votes


def test_author_is_registered_with_window_ttl(ledger: VoteLedger, article, store, clock) -> None:
    assert ledger.has_voted(article.id, "alice")
    clock.advance(WEEK)
    assert store.exists(f"voted:{article.id}") == 0


def test_author_cannot_vote_again(ledger: VoteLedger, article, clock) -> None:
    assert ledger.cast_vote(article.id, "alice", now=clock()) is VoteOutcome.ALREADY_VOTED


def test_first_vote_bumps_score_and_count(ledger, article, scores, repo, clock) -> None:
    assert ledger.cast_vote(article.id, "bob", now=clock()) is VoteOutcome.APPLIED

    assert repo.get_article(article.id).votes == 2
    assert scores.score_of(article.id) == article.time + 2 * VOTE_SCORE
    _assert_score_matches_votes(scores, repo, article.id)


def test_repeat_vote_changes_nothing(ledger, article, scores, repo, clock) -> None:
    ledger.cast_vote(article.id, "bob", now=clock())
    assert ledger.cast_vote(article.id, "bob", now=clock()) is VoteOutcome.ALREADY_VOTED

    assert repo.get_article(article.id).votes == 2
    _assert_score_matches_votes(scores, repo, article.id)


def test_vote_at_window_edge_is_accepted(ledger, article, clock) -> None:
    assert ledger.cast_vote(article.id, "bob", now=clock() + WEEK) is VoteOutcome.APPLIED


def test_vote_after_window_is_ignored(ledger, article, scores, repo, store, clock) -> None:
    before = scores.score_of(article.id)

    outcome = ledger.cast_vote(article.id, "bob", now=clock() + WEEK + 1)

    assert outcome is VoteOutcome.WINDOW_CLOSED
    assert scores.score_of(article.id) == before
    assert repo.get_article(article.id).votes == 1
    assert not store.sismember(f"voted:{article.id}", "bob")


def test_vote_on_unknown_article_raises(ledger, clock) -> None:
    with pytest.raises(ArticleNotFoundError):
        ledger.cast_vote(404, "bob", now=clock())


def test_votes_count_distinct_voters(ledger, article, scores, repo, clock) -> None:
    voters = ["bob", "carol", "bob", "dave", "carol", "alice"]
    outcomes = [ledger.cast_vote(article.id, user, now=clock()) for user in voters]

    assert outcomes.count(VoteOutcome.APPLIED) == 3
    assert repo.get_article(article.id).votes == 4
    _assert_score_matches_votes(scores, repo, article.id)


def test_concurrent_votes_by_same_user_apply_once(ledger, article, scores, repo, clock) -> None:
    now = clock()
    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(lambda _: ledger.cast_vote(article.id, "bob", now=now), range(32)))

    assert outcomes.count(VoteOutcome.APPLIED) == 1
    assert repo.get_article(article.id).votes == 2
    _assert_score_matches_votes(scores, repo, article.id)

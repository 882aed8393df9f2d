"""One-vote-per-user bookkeeping for articles."""

from __future__ import annotations

import logging
from enum import Enum

from linkshare.core.errors import ArticleNotFoundError
from linkshare.core.settings import settings
from linkshare.services.articles import ArticleRepository
from linkshare.services.keys import voted_key
from linkshare.services.scoring import ScoreEngine
from linkshare.store.base import StoreClient, StorePipeline, batched

__all__ = ["VoteLedger", "VoteOutcome"]

logger = logging.getLogger(__name__)


class VoteOutcome(Enum):
    """Result of a vote attempt; none of these is an error."""

    APPLIED = "applied"
    ALREADY_VOTED = "already_voted"
    WINDOW_CLOSED = "window_closed"


class VoteLedger:
    """Tracks who voted for each article in ``voted:<id>`` sets."""

    def __init__(
        self,
        store: StoreClient,
        scores: ScoreEngine,
        articles: ArticleRepository,
        window_seconds: int | None = None,
    ) -> None:
        self.store = store
        self.scores = scores
        self.articles = articles
        self.window_seconds = (
            settings.voting_window_seconds if window_seconds is None else window_seconds
        )

    def register_author_as_voted(
        self,
        article_id: int,
        author: str,
        *,
        pipe: StorePipeline | None = None,
    ) -> None:
        """Record the poster as a voter so they cannot vote for their own article."""
        key = voted_key(article_id)
        with batched(self.store, pipe) as batch:
            batch.sadd(key, author)
            batch.expire(key, self.window_seconds)

    def has_voted(self, article_id: int, user: str) -> bool:
        """Return True if ``user`` is in the article's voted-set.

        The voted-set expires one voting window after the article was posted,
        so from then on this returns False for every user, including the
        poster and anyone who did vote.
        """
        return bool(self.store.sismember(voted_key(article_id), user))

    def cast_vote(self, article_id: int, user: str, *, now: float) -> VoteOutcome:
        """Count ``user``'s vote unless the window is closed or they already voted.

        Args:
            article_id: Article being voted for.
            user: Voter identifier.
            now: Current Unix time in seconds.

        Returns:
            The outcome of the attempt. Only ``APPLIED`` changes state.

        Raises:
            ArticleNotFoundError: If the article is not in the time ranking.

        Notes:
            ``SADD`` reports whether the voter was newly added, which makes it
            the single arbitration point when the same user votes concurrently.
        """
        created_at = self.scores.created_at_of(article_id)
        if created_at is None:
            raise ArticleNotFoundError(article_id)
        cutoff = now - self.window_seconds
        if created_at < cutoff:
            logger.debug("Vote by %s on article %s ignored: window closed", user, article_id)
            return VoteOutcome.WINDOW_CLOSED

        if not self.store.sadd(voted_key(article_id), user):
            logger.debug("Vote by %s on article %s ignored: already voted", user, article_id)
            return VoteOutcome.ALREADY_VOTED

        with batched(self.store) as batch:
            self.scores.bump_score(article_id, self.scores.vote_score, pipe=batch)
            self.articles.increment_vote_count(article_id, pipe=batch)
        logger.debug("Vote by %s on article %s applied", user, article_id)
        return VoteOutcome.APPLIED

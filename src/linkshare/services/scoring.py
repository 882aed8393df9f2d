"""Global score and time rankings."""

from __future__ import annotations

from enum import Enum

from linkshare.core.errors import InvalidPageError
from linkshare.core.settings import settings
from linkshare.services.keys import SCORE_RANKING, TIME_RANKING, article_id_from_key, article_key
from linkshare.store.base import StoreClient, StorePipeline, batched

__all__ = ["Order", "ScoreEngine"]


class Order(str, Enum):
    """Base rankings an article list can be sorted by."""

    SCORE = "score"
    TIME = "time"

    @property
    def key(self) -> str:
        """Store key of the global ranking for this order."""
        return SCORE_RANKING if self is Order.SCORE else TIME_RANKING


class ScoreEngine:
    """Owns the ``score:`` and ``time:`` sorted sets.

    An article's score is its creation time plus ``vote_score`` for every
    vote it holds, so newer articles need fewer votes to rank as high.
    """

    def __init__(self, store: StoreClient, vote_score: int | None = None) -> None:
        self.store = store
        self.vote_score = settings.vote_score if vote_score is None else vote_score

    def seed_article(
        self,
        article_id: int,
        created_at: int,
        *,
        pipe: StorePipeline | None = None,
    ) -> None:
        """Add a new article to both rankings, pre-credited with one vote."""
        member = article_key(article_id)
        with batched(self.store, pipe) as batch:
            batch.zadd(TIME_RANKING, {member: created_at})
            batch.zadd(SCORE_RANKING, {member: created_at + self.vote_score})

    def bump_score(
        self,
        article_id: int,
        delta: float,
        *,
        pipe: StorePipeline | None = None,
    ) -> None:
        with batched(self.store, pipe) as batch:
            batch.zincrby(SCORE_RANKING, delta, article_key(article_id))

    def score_of(self, article_id: int) -> float | None:
        return self.store.zscore(SCORE_RANKING, article_key(article_id))

    def created_at_of(self, article_id: int) -> float | None:
        return self.store.zscore(TIME_RANKING, article_key(article_id))

    def page(self, ranking_key: str, page: int, page_size: int) -> list[int]:
        """Return one page of article ids from a ranking, highest value first.

        Args:
            ranking_key: Sorted set to read; a global ranking or a group cache.
            page: 1-based page number.
            page_size: Number of articles per page.

        Raises:
            InvalidPageError: If ``page`` or ``page_size`` is not positive.
        """
        if page <= 0:
            raise InvalidPageError(f"Page must be 1 or greater, got {page}")
        if page_size <= 0:
            raise InvalidPageError(f"Page size must be 1 or greater, got {page_size}")
        start = (page - 1) * page_size
        end = start + page_size - 1
        members = self.store.zrevrange(ranking_key, start, end)
        return [article_id_from_key(member) for member in members]

    def page_by_score(self, page: int, page_size: int) -> list[int]:
        return self.page(SCORE_RANKING, page, page_size)

    def page_by_time(self, page: int, page_size: int) -> list[int]:
        return self.page(TIME_RANKING, page, page_size)

"""Service-level entry points for posting, voting and listing articles."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable

from linkshare.core.errors import ArticleNotFoundError
from linkshare.core.settings import settings
from linkshare.models.article import Article
from linkshare.services.articles import ArticleRepository
from linkshare.services.groups import GroupIndex
from linkshare.services.scoring import Order, ScoreEngine
from linkshare.services.votes import VoteLedger, VoteOutcome
from linkshare.store import StoreClient, get_store

__all__ = ["ArticleService", "get_article_service"]

logger = logging.getLogger(__name__)


class ArticleService:
    """Wires the repository, ledger, rankings and groups to one store.

    ``clock`` supplies the current Unix time; tests pass a controllable one.
    """

    def __init__(
        self,
        store: StoreClient,
        clock: Callable[[], float] = time.time,
        *,
        page_size: int | None = None,
    ) -> None:
        self.store = store
        self.clock = clock
        self.page_size = settings.articles_per_page if page_size is None else page_size
        self.articles = ArticleRepository(store)
        self.scores = ScoreEngine(store)
        self.votes = VoteLedger(store, self.scores, self.articles)
        self.groups = GroupIndex(store, self.scores)

    def post_article(self, author: str, title: str, link: str) -> Article:
        """Create an article, seed its rankings and mark the author as voted.

        The hash, both ranking entries and the voted-set go out in one
        pipeline once the id has been allocated.
        """
        now = int(self.clock())
        pipe = self.store.pipeline()
        article = self.articles.create_article(author, title, link, now=now, pipe=pipe)
        self.scores.seed_article(article.id, now, pipe=pipe)
        self.votes.register_author_as_voted(article.id, author, pipe=pipe)
        pipe.execute()
        logger.info("Article %s posted by %s", article.id, author)
        return article

    def get_article(self, article_id: int) -> Article:
        return self.articles.get_article(article_id)

    def vote(self, article_id: int, user: str) -> VoteOutcome:
        return self.votes.cast_vote(article_id, user, now=self.clock())

    def has_voted(self, article_id: int, user: str) -> bool:
        self._require_article(article_id)
        return self.votes.has_voted(article_id, user)

    def list_articles(
        self,
        page: int,
        order: Order = Order.SCORE,
        page_size: int | None = None,
    ) -> list[Article]:
        """Return one page of articles from a global ranking."""
        size = self.page_size if page_size is None else page_size
        ids = self.scores.page(order.key, page, size)
        return self.articles.get_articles(ids)

    def add_groups(self, article_id: int, groups: Iterable[str]) -> None:
        self._require_article(article_id)
        self.groups.add_to_groups(article_id, groups)

    def remove_groups(self, article_id: int, groups: Iterable[str]) -> None:
        self._require_article(article_id)
        self.groups.remove_from_groups(article_id, groups)

    def list_group_articles(
        self,
        group: str,
        page: int,
        order: Order = Order.SCORE,
        page_size: int | None = None,
    ) -> list[Article]:
        """Return one page of a group's articles, ranked by ``order``."""
        size = self.page_size if page_size is None else page_size
        ids = self.groups.page_by_group_and_order(group, order, page, size)
        return self.articles.get_articles(ids)

    def _require_article(self, article_id: int) -> None:
        if not self.articles.exists(article_id):
            raise ArticleNotFoundError(article_id)


def get_article_service() -> ArticleService:
    """Return an article service bound to the process-wide store."""
    return ArticleService(get_store())

"""Data access helpers for article records."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from linkshare.core.errors import ArticleNotFoundError
from linkshare.models.article import Article
from linkshare.services.keys import ARTICLE_COUNTER, article_key
from linkshare.store.base import StoreClient, StorePipeline, batched

__all__ = ["ArticleRepository"]

logger = logging.getLogger(__name__)


class ArticleRepository:
    """Thin wrapper around store access for article hashes."""

    def __init__(self, store: StoreClient) -> None:
        """Initialize the repository with a store client."""
        self.store = store

    def create_article(
        self,
        author: str,
        title: str,
        link: str,
        *,
        now: int,
        pipe: StorePipeline | None = None,
    ) -> Article:
        """Allocate an id and write the full article hash.

        Args:
            author: User identifier of the poster.
            title: Article title.
            link: URL being shared.
            now: Creation time in Unix seconds.
            pipe: Pipeline to queue the hash write on. When omitted the write
                is sent on its own.

        Returns:
            The new article, with ``votes`` set to 1.

        Notes:
            Id allocation goes out immediately; the five fields are written
            together by a single ``HSET``.
        """
        article_id = int(self.store.incr(ARTICLE_COUNTER))
        article = Article(id=article_id, title=title, link=link, poster=author, time=now, votes=1)
        with batched(self.store, pipe) as batch:
            batch.hset(article_key(article_id), article.to_hash())
        return article

    def get_article(self, article_id: int) -> Article:
        """Return an article by identifier or raise ``ArticleNotFoundError``."""
        data = self.store.hgetall(article_key(article_id))
        if not data:
            raise ArticleNotFoundError(article_id)
        return Article.from_hash(article_id, data)

    def exists(self, article_id: int) -> bool:
        return bool(self.store.exists(article_key(article_id)))

    def get_articles(self, article_ids: Sequence[int]) -> list[Article]:
        """Resolve ranked ids to records, preserving their order.

        Ids whose hash has disappeared are skipped.
        """
        if not article_ids:
            return []
        pipe = self.store.pipeline(transaction=False)
        for article_id in article_ids:
            pipe.hgetall(article_key(article_id))
        articles = []
        for article_id, data in zip(article_ids, pipe.execute()):
            if not data:
                logger.warning("Ranking references missing article %s", article_id)
                continue
            articles.append(Article.from_hash(article_id, data))
        return articles

    def increment_vote_count(self, article_id: int, *, pipe: StorePipeline | None = None) -> None:
        """Add exactly one vote to the stored count."""
        with batched(self.store, pipe) as batch:
            batch.hincrby(article_key(article_id), "votes", 1)

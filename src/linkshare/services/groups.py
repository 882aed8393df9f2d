"""Manual group tagging and group-scoped rankings."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from linkshare.core.errors import GroupNotFoundError
from linkshare.core.settings import settings
from linkshare.services.keys import article_key, group_key
from linkshare.services.scoring import Order, ScoreEngine
from linkshare.store.base import StoreClient

__all__ = ["GroupIndex"]

logger = logging.getLogger(__name__)


class GroupIndex:
    """Keeps ``group:<name>`` sets and derives cached per-group rankings.

    A group ranking lives at ``<order key><group>`` (for example
    ``score:tech``) and expires after ``cache_seconds``; until then new votes
    and new members are not reflected in it.
    """

    def __init__(
        self,
        store: StoreClient,
        scores: ScoreEngine,
        cache_seconds: int | None = None,
    ) -> None:
        self.store = store
        self.scores = scores
        self.cache_seconds = settings.group_cache_seconds if cache_seconds is None else cache_seconds

    def add_to_groups(self, article_id: int, group_names: Iterable[str]) -> None:
        member = article_key(article_id)
        for group in group_names:
            self.store.sadd(group_key(group), member)

    def remove_from_groups(self, article_id: int, group_names: Iterable[str]) -> None:
        member = article_key(article_id)
        for group in group_names:
            self.store.srem(group_key(group), member)

    def cache_key(self, group: str, order: Order) -> str:
        return order.key + group

    def page_by_group_and_order(
        self,
        group: str,
        order: Order,
        page: int,
        page_size: int,
    ) -> list[int]:
        """Return one page of a group's articles ranked by ``order``.

        The group ranking is rebuilt from ``ZINTERSTORE`` with ``MAX``
        aggregation when its cached copy is missing. Group members score 1 in
        the intersection, so each article keeps its value from the base
        ranking.

        Raises:
            GroupNotFoundError: If the group has no members and nothing is cached.
            InvalidPageError: If ``page`` or ``page_size`` is not positive.
        """
        key = self.cache_key(group, order)
        if not self.store.exists(key):
            self._rebuild(group, order, key)
        return self.scores.page(key, page, page_size)

    def _rebuild(self, group: str, order: Order, key: str) -> None:
        members_key = group_key(group)
        if not self.store.exists(members_key):
            raise GroupNotFoundError(group)
        pipe = self.store.pipeline()
        pipe.zinterstore(key, [members_key, order.key], aggregate="MAX")
        pipe.expire(key, self.cache_seconds)
        size, _ = pipe.execute()
        logger.info("Rebuilt %s ranking for group %r with %d articles", order.value, group, size)

"""Exception hierarchy shared by the store clients and the ranking services."""

from __future__ import annotations


class LinkshareError(RuntimeError):
    """Base exception raised for Linkshare failures."""


class NotFoundError(LinkshareError):
    """Raised when a requested entity does not exist in the store."""


class ArticleNotFoundError(NotFoundError):
    """Raised when an article id has no stored record."""

    def __init__(self, article_id: int | str) -> None:
        super().__init__(f"Article {article_id} not found")
        self.article_id = article_id


class GroupNotFoundError(NotFoundError):
    """Raised when a group has no members and no cached ranking."""

    def __init__(self, group: str) -> None:
        super().__init__(f"Group {group!r} not found")
        self.group = group


class InvalidPageError(LinkshareError, ValueError):
    """Raised when a page number or page size is not a positive integer."""


class StoreUnavailableError(LinkshareError):
    """Raised when the backing store cannot be reached.

    Store adapters raise this from the underlying transport error. The
    services never retry; the failure surfaces to the caller unchanged.
    """

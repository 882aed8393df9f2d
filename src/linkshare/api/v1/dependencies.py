"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends

from linkshare.services.news import ArticleService, get_article_service


def get_article_service_dep() -> ArticleService:
    """Return the article service bound to the configured store."""
    return get_article_service()


# Type alias for the article service dependency
ArticleServiceDep = Annotated[ArticleService, Depends(get_article_service_dep)]

# src/linkshare/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import articles_router, groups_router, votes_router

__all__ = [
    "articles_router",
    "groups_router",
    "votes_router",
]

"""API endpoint modules for version 1."""

from .articles import router as articles_router
from .groups import router as groups_router
from .votes import router as votes_router

__all__ = [
    "articles_router",
    "groups_router",
    "votes_router",
]

# src/linkshare/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .article import ArticleCreate, ArticleResponse, GroupUpdate
from .vote import VoteCreate, VoteResponse, VoteStatus

__all__ = [
    "ArticleCreate", "ArticleResponse", "GroupUpdate",
    "VoteCreate", "VoteResponse", "VoteStatus",
]

"""Ranking and deduplication services for Linkshare."""

from .articles import ArticleRepository
from .groups import GroupIndex
from .news import ArticleService, get_article_service
from .scoring import Order, ScoreEngine
from .votes import VoteLedger, VoteOutcome

__all__ = [
    "ArticleRepository",
    "ArticleService",
    "GroupIndex",
    "Order",
    "ScoreEngine",
    "VoteLedger",
    "VoteOutcome",
    "get_article_service",
]

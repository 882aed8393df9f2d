"""Store key layout shared by the ranking services."""

from __future__ import annotations

from typing import Final

ARTICLE_COUNTER: Final[str] = "article:"
SCORE_RANKING: Final[str] = "score:"
TIME_RANKING: Final[str] = "time:"


def article_key(article_id: int) -> str:
    return f"article:{article_id}"


def article_id_from_key(key: str) -> int:
    """Return the numeric id of an ``article:<id>`` ranking member."""
    return int(key.partition(":")[-1])


def voted_key(article_id: int) -> str:
    return f"voted:{article_id}"


def group_key(group: str) -> str:
    return f"group:{group}"

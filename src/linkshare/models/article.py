"""Article record as stored in the ``article:<id>`` hash."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Article:
    """A posted link with its author, creation time and vote count.

    Everything except ``votes`` is fixed at creation time.
    """

    id: int
    title: str
    link: str
    poster: str
    time: int
    votes: int = 1

    @classmethod
    def from_hash(cls, article_id: int, data: Mapping[str, str]) -> Article:
        """Build an article from the string fields returned by ``HGETALL``."""
        return cls(
            id=article_id,
            title=data["title"],
            link=data["link"],
            poster=data["poster"],
            time=int(float(data["time"])),
            votes=int(data["votes"]),
        )

    def to_hash(self) -> dict[str, str | int]:
        return {
            "title": self.title,
            "link": self.link,
            "poster": self.poster,
            "time": self.time,
            "votes": self.votes,
        }

# src/linkshare/schemas/vote.py
"""Vote-related Pydantic schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class VoteCreate(BaseModel):
    """Schema for casting a vote."""

    user: str = Field(..., min_length=1, max_length=128, description="Voting user identifier")


class VoteResponse(BaseModel):
    """Schema describing what happened to a vote."""

    article_id: int
    outcome: Literal["applied", "already_voted", "window_closed"]
    votes: int


class VoteStatus(BaseModel):
    """Whether a user has voted for an article."""

    article_id: int
    user: str
    voted: bool

# src/linkshare/schemas/article.py
"""Article-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class ArticleCreate(BaseModel):
    """Schema for posting a new article."""

    user: str = Field(..., min_length=1, max_length=128, description="Posting user identifier")
    title: str = Field(..., min_length=1, max_length=300)
    link: HttpUrl = Field(..., description="URL being shared")


class ArticleResponse(BaseModel):
    """Schema for article information returned by the API."""

    id: int
    title: str
    link: str
    poster: str
    time: int
    votes: int

    model_config = ConfigDict(from_attributes=True)


class GroupUpdate(BaseModel):
    """Schema for tagging an article into groups or removing it from them."""

    add: list[str] = Field(default_factory=list)
    remove: list[str] = Field(default_factory=list)

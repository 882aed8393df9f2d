# src/linkshare/api/v1/endpoints/votes.py
"""Vote-related endpoints for the Linkshare API."""

from fastapi import APIRouter, HTTPException, status

from linkshare.core.errors import ArticleNotFoundError
from linkshare.schemas.vote import VoteCreate, VoteResponse, VoteStatus

from ..dependencies import ArticleServiceDep

router = APIRouter(prefix="/articles", tags=["votes"])


@router.post("/{article_id}/votes", response_model=VoteResponse)
async def cast_vote(
    article_id: int,
    vote_data: VoteCreate,
    service: ArticleServiceDep,
) -> VoteResponse:
    """Cast a vote for an article.

    Repeat votes and votes after the voting window are reported in
    ``outcome`` rather than rejected.
    """
    try:
        outcome = service.vote(article_id, vote_data.user)
        article = service.get_article(article_id)
    except ArticleNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    return VoteResponse(article_id=article_id, outcome=outcome.value, votes=article.votes)


@router.get("/{article_id}/votes/{user}", response_model=VoteStatus)
async def get_vote_status(article_id: int, user: str, service: ArticleServiceDep) -> VoteStatus:
    """Report whether ``user`` has voted for the article."""
    try:
        voted = service.has_voted(article_id, user)
    except ArticleNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    return VoteStatus(article_id=article_id, user=user, voted=voted)

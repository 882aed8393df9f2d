# src/linkshare/api/v1/endpoints/groups.py
"""Group listing endpoints for the Linkshare API."""

from fastapi import APIRouter, HTTPException, Query, status

from linkshare.core.errors import GroupNotFoundError, InvalidPageError
from linkshare.schemas.article import ArticleResponse
from linkshare.services.scoring import Order

from ..dependencies import ArticleServiceDep

router = APIRouter(prefix="/groups", tags=["groups"])


@router.get("/{group}/articles", response_model=list[ArticleResponse])
async def list_group_articles(
    group: str,
    service: ArticleServiceDep,
    page: int = Query(1, description="1-based page number"),
    order: Order = Query(Order.SCORE, description="Ranking to sort by"),
    page_size: int | None = Query(None, ge=1, le=100, description="Articles per page"),
) -> list[ArticleResponse]:
    """Return one page of a group's articles.

    Group rankings are cached for a short while, so recent votes may not be
    reflected yet.
    """
    try:
        articles = service.list_group_articles(group, page, order, page_size)
    except GroupNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    except InvalidPageError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return [ArticleResponse.model_validate(article) for article in articles]

# src/linkshare/api/v1/endpoints/articles.py
"""Article-related endpoints for the Linkshare API."""

from fastapi import APIRouter, HTTPException, Query, status

from linkshare.core.errors import ArticleNotFoundError, InvalidPageError
from linkshare.schemas.article import ArticleCreate, ArticleResponse, GroupUpdate
from linkshare.services.scoring import Order

from ..dependencies import ArticleServiceDep

router = APIRouter(prefix="/articles", tags=["articles"])


@router.post("/", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def post_article(payload: ArticleCreate, service: ArticleServiceDep) -> ArticleResponse:
    """Post a new article; the poster's own vote is counted immediately."""
    article = service.post_article(payload.user, payload.title, str(payload.link))
    return ArticleResponse.model_validate(article)


@router.get("/", response_model=list[ArticleResponse])
async def list_articles(
    service: ArticleServiceDep,
    page: int = Query(1, description="1-based page number"),
    order: Order = Query(Order.SCORE, description="Ranking to sort by"),
    page_size: int | None = Query(None, ge=1, le=100, description="Articles per page"),
) -> list[ArticleResponse]:
    """Return one page of articles, highest score (or newest) first."""
    try:
        articles = service.list_articles(page, order, page_size)
    except InvalidPageError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return [ArticleResponse.model_validate(article) for article in articles]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(article_id: int, service: ArticleServiceDep) -> ArticleResponse:
    """Return a single article."""
    try:
        article = service.get_article(article_id)
    except ArticleNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    return ArticleResponse.model_validate(article)


@router.post("/{article_id}/groups", status_code=status.HTTP_204_NO_CONTENT)
async def update_groups(
    article_id: int,
    payload: GroupUpdate,
    service: ArticleServiceDep,
) -> None:
    """Tag an article into groups and/or remove it from groups."""
    try:
        if payload.add:
            service.add_groups(article_id, payload.add)
        if payload.remove:
            service.remove_groups(article_id, payload.remove)
    except ArticleNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err

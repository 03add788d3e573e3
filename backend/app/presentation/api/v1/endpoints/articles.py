"""Article CRUD, ordering and search endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import ArticleCount, ArticleCreate, ArticleResponse, ArticleUpdate
from app.application.services import ArticleService
from app.domain.entities import Article
from app.domain.exceptions import EntityNotFoundError
from app.domain.ordering import parse_order
from app.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])


def _ensure_valid(article: Article) -> None:
    if not article.is_valid:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"errors": article.errors},
        )


def _to_response(articles: list[Article]) -> list[ArticleResponse]:
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    order: str | None = Query(
        None,
        description="Sort as 'field', 'field:asc', 'field:desc' or '-field'. "
        "Articles missing the field come first either way.",
        examples=["title:desc"],
    ),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every article, optionally ordered by title, content, author or date."""
    if order is None:
        return _to_response(await service.list_articles())
    try:
        field, direction = parse_order(order)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return _to_response(await service.order_articles(field, direction))


@router.get("/count", response_model=ArticleCount)
async def count_articles(
    service: ArticleService = Depends(get_article_service),
) -> ArticleCount:
    return ArticleCount(count=await service.count_articles())


@router.get("/search", response_model=list[ArticleResponse])
async def search_articles(
    q: str = Query(..., min_length=1, description="Phrase to look for in title or content"),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Articles whose title or content contains the phrase."""
    return _to_response(await service.search_articles(q))


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article."""
    article = await service.create_article(data)
    _ensure_valid(article)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.patch("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: int,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Update the fields sent in the body; others stay as they are."""
    try:
        article = await service.update_article(article_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    _ensure_valid(article)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Delete an article by ID."""
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

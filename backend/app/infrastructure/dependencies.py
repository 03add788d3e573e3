"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.application.services import ArticleService
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import SQLAlchemyArticleRepository


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    settings = get_settings()
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository, search_case_sensitive=settings.search_case_sensitive)

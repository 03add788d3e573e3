"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import case, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ArticleRepository
from app.domain.entities import Article
from app.domain.ordering import ArticleSortField, SortDirection
from app.domain.search import filter_articles
from app.infrastructure.database.models import ArticleModel

_TEXT_FIELDS = frozenset({ArticleSortField.TITLE, ArticleSortField.CONTENT, ArticleSortField.AUTHOR})


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
            author=model.author,
            date=model.date,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            content=entity.content,
            author=entity.author,
            date=entity.date,
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.id.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(ArticleModel))
        return result.scalar_one()

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise ValueError(f"Article {article.id} not found in database")
        model.title = article.title
        model.content = article.content
        model.author = article.author
        model.date = article.date
        model.updated_at = article.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, article_id: int) -> bool:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def order_by(
        self, field: ArticleSortField, direction: SortDirection
    ) -> list[Article]:
        column = getattr(ArticleModel, field.value)
        # NULLs first in both directions, spelled out rather than left to the backend.
        missing_first = case((column.is_(None), 0), else_=1)
        sort_key = column
        if field in _TEXT_FIELDS and self._dialect_name() == "postgresql":
            # Byte-wise comparison, matching SQLite's BINARY default.
            sort_key = column.collate("C")
        sort_key = sort_key.desc() if direction is SortDirection.DESC else sort_key.asc()

        stmt = select(ArticleModel).order_by(missing_first, sort_key, ArticleModel.id.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def search(self, query: str, case_sensitive: bool = True) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.id.asc())
        if case_sensitive:
            # LIKE narrows the candidates (it ignores ASCII case on SQLite),
            # the domain filter then enforces exact containment.
            stmt = stmt.where(
                or_(
                    ArticleModel.title.contains(query, autoescape=True),
                    ArticleModel.content.contains(query, autoescape=True),
                )
            )
        # Case-insensitive matching uses casefold(), which SQL lower() does not
        # reproduce outside ASCII, so every row goes to the domain filter.
        result = await self._session.execute(stmt)
        candidates = [self._to_entity(row) for row in result.scalars().all()]
        return filter_articles(candidates, query, case_sensitive=case_sensitive)

    def _dialect_name(self) -> str:
        return self._session.get_bind().dialect.name

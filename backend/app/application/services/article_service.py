"""Application service (use case) for Article operations."""

import logging

from app.application.interfaces import ArticleRepository
from app.application.schemas import ArticleCreate, ArticleUpdate
from app.domain.entities import Article
from app.domain.exceptions import EntityNotFoundError
from app.domain.ordering import ArticleSortField, SortDirection

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Validation failures are not raised: ``create_article`` and
    ``update_article`` hand back the entity with ``is_valid`` False and its
    ``errors`` filled in, and nothing is written. A missing record is the
    one hard failure and raises ``EntityNotFoundError``.
    """

    def __init__(self, repository: ArticleRepository, *, search_case_sensitive: bool = True):
        self._repository = repository
        self._search_case_sensitive = search_case_sensitive

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            logger.debug("Article %s not found", article_id)
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def count_articles(self) -> int:
        return await self._repository.count()

    async def create_article(self, data: ArticleCreate) -> Article:
        article = Article(
            title=data.title,
            content=data.content,
            author=data.author,
            date=data.date,
        )
        if not article.is_valid:
            logger.info("Rejected article: %s", article.errors)
            return article

        created = await self._repository.create(article)
        logger.info("Created article %s (%r)", created.id, created.title)
        return created

    async def update_article(self, article: Article | int, data: ArticleUpdate) -> Article:
        """Merge the fields set on ``data`` into the article and save it if still valid.

        Given an ``Article``, that same object is changed in place and
        returned, so the caller's reference shows the new values. Given an
        id, the stored article is loaded first.
        """
        if isinstance(article, Article):
            if article.id is None or await self._repository.get_by_id(article.id) is None:
                raise EntityNotFoundError("Article", article.id if article.id is not None else "unsaved")
        else:
            article = await self.get_article(article)

        article.update(**data.changes())
        if not article.is_valid:
            logger.info("Rejected update of article %s: %s", article.id, article.errors)
            return article

        await self._repository.update(article)
        logger.info("Updated article %s", article.id)
        return article

    async def delete_article(self, article: Article | int) -> None:
        article_id = article.id if isinstance(article, Article) else article
        if article_id is None:
            raise EntityNotFoundError("Article", "unsaved")
        deleted = await self._repository.delete(article_id)
        if not deleted:
            raise EntityNotFoundError("Article", article_id)
        logger.info("Deleted article %s", article_id)

    async def order_articles(
        self,
        field: ArticleSortField,
        direction: SortDirection = SortDirection.ASC,
    ) -> list[Article]:
        return await self._repository.order_by(
            ArticleSortField(field), SortDirection(direction)
        )

    async def search_articles(self, query: str) -> list[Article]:
        results = await self._repository.search(
            query, case_sensitive=self._search_case_sensitive
        )
        logger.debug("Search %r matched %d article(s)", query, len(results))
        return results

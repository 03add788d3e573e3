"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from app.domain.entities import Article
from app.domain.ordering import ArticleSortField, SortDirection


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article, oldest ID first."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Number of stored articles."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Update an existing article."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def order_by(
        self, field: ArticleSortField, direction: SortDirection
    ) -> list[Article]:
        """Retrieve every article sorted by ``field``, missing values first in both directions."""
        ...

    @abstractmethod
    async def search(self, query: str, case_sensitive: bool = True) -> list[Article]:
        """Retrieve articles whose title or content contains ``query``."""
        ...

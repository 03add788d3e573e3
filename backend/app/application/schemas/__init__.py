from .article import ArticleCreate, ArticleUpdate, ArticleResponse, ArticleCount

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleCount",
]

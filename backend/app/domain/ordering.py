"""Explicit sort rules for articles.

Missing values sort as the lowest possible value *regardless of direction*,
so an article without an author precedes every authored one in both
ascending and descending order. Databases disagree on where NULLs go, so
this rule lives here and in the SQL repository's ORDER BY, never in a
database default.
"""

from collections.abc import Iterable
from enum import Enum

from app.domain.entities import Article


class ArticleSortField(str, Enum):
    TITLE = "title"
    CONTENT = "content"
    AUTHOR = "author"
    DATE = "date"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


def sort_articles(
    articles: Iterable[Article],
    field: ArticleSortField,
    direction: SortDirection = SortDirection.ASC,
) -> list[Article]:
    """Return a new list ordered by ``field``, missing values first, ties by id."""
    field = ArticleSortField(field)
    direction = SortDirection(direction)

    # Id order first; the sorts below are stable.
    ordered = sorted(articles, key=_id_key)
    present = [a for a in ordered if getattr(a, field.value) is not None]
    missing = [a for a in ordered if getattr(a, field.value) is None]
    # reverse=True keeps equal keys in their id order
    present.sort(
        key=lambda a: getattr(a, field.value),
        reverse=direction is SortDirection.DESC,
    )
    return missing + present


def parse_order(order: str) -> tuple[ArticleSortField, SortDirection]:
    """Parse ``"title"``, ``"title:desc"`` or ``"-title"`` into a field and direction."""
    raw = order.strip()
    if raw.startswith("-"):
        name, direction = raw[1:], SortDirection.DESC.value
    elif ":" in raw:
        name, direction = raw.split(":", 1)
    else:
        name, direction = raw, SortDirection.ASC.value

    try:
        sort_field = ArticleSortField(name.strip().lower())
    except ValueError:
        allowed = ", ".join(f.value for f in ArticleSortField)
        raise ValueError(f"Unknown sort field '{name}'. Expected one of: {allowed}") from None
    try:
        sort_direction = SortDirection(direction.strip().lower())
    except ValueError:
        raise ValueError(f"Unknown sort direction '{direction}'. Expected 'asc' or 'desc'") from None
    return sort_field, sort_direction


def _id_key(article: Article) -> tuple[bool, int]:
    # Unsaved articles (no id) go after persisted ones.
    return (article.id is None, article.id or 0)

"""Substring search over article title and content."""

from collections.abc import Iterable

from app.domain.entities import Article

SEARCHABLE_FIELDS = ("title", "content")


def matches_query(article: Article, query: str, *, case_sensitive: bool = True) -> bool:
    """True when ``query`` appears verbatim in the title or the content.

    Multi-word queries match only as a contiguous phrase. An empty query
    matches everything; a missing title or content never matches.
    """
    needle = query if case_sensitive else query.casefold()
    for name in SEARCHABLE_FIELDS:
        text = getattr(article, name)
        if text is None:
            continue
        haystack = text if case_sensitive else text.casefold()
        if needle in haystack:
            return True
    return False


def filter_articles(
    articles: Iterable[Article], query: str, *, case_sensitive: bool = True
) -> list[Article]:
    return [a for a in articles if matches_query(a, query, case_sensitive=case_sensitive)]

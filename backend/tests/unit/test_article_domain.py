"""Unit tests for the Article entity and its validation, ordering and search rules."""

from datetime import date, datetime

import pytest

from app.domain.entities import Article
from app.domain.ordering import ArticleSortField, SortDirection, parse_order, sort_articles
from app.domain.search import filter_articles, matches_query
from app.domain.validation import is_blank, presence_errors, validate


# ── Validation ───────────────────────────────────────────────────────


@pytest.mark.parametrize("value", [None, "", "   ", "\n\t"])
def test_blank_values(value):
    assert is_blank(value)


def test_non_blank_value():
    assert not is_blank(" x ")


def test_validate_requires_title_and_content():
    assert validate({"title": "Sample Article", "content": "Lorem"})
    assert not validate({"title": "Sample Article"})
    assert presence_errors({}) == {
        "title": ["can't be blank"],
        "content": ["can't be blank"],
    }


def test_author_and_date_are_optional():
    assert validate({"title": "T", "content": "C", "author": None, "date": None})


# ── Entity ───────────────────────────────────────────────────────────


def test_entity_truncates_datetime():
    article = Article(title="T", content="C", date=datetime(2022, 1, 2, 23, 59))
    assert article.date == date(2022, 1, 2)
    assert type(article.date) is date


def test_entity_validity_and_persistence_flags():
    article = Article(title="T", content=None)
    assert not article.is_valid
    assert article.errors == {"content": ["can't be blank"]}
    assert not article.is_persisted


def test_empty_author_is_distinct_from_missing():
    assert Article(title="T", content="C", author="").author == ""
    assert Article(title="T", content="C").author is None


def test_update_merges_fields_and_touches_timestamp():
    article = Article(title="T", content="C", author="John Doe")
    before = article.updated_at
    article.update(content="Updated content", date=datetime(2022, 1, 1, 8))
    assert article.content == "Updated content"
    assert article.author == "John Doe"
    assert article.date == date(2022, 1, 1)
    assert article.updated_at >= before


def test_update_rejects_unknown_fields():
    with pytest.raises(TypeError):
        Article(title="T", content="C").update(id=5)


def test_equality_follows_id():
    assert Article(title="A", content="C", id=1) == Article(title="B", content="D", id=1)
    assert Article(title="A", content="C", id=1) != Article(title="A", content="C", id=2)
    unsaved = Article(title="A", content="C")
    assert unsaved == unsaved
    assert unsaved != Article(title="A", content="C")
    assert len({Article(title="A", content="C", id=1), Article(title="B", content="D", id=1)}) == 1


# ── Ordering ─────────────────────────────────────────────────────────


def _article(id: int, **fields) -> Article:
    fields.setdefault("title", f"Article {id}")
    fields.setdefault("content", "Lorem")
    return Article(id=id, **fields)


def test_sort_text_is_case_sensitive():
    lower = _article(1, title="apple")
    upper = _article(2, title="Banana")
    assert sort_articles([lower, upper], ArticleSortField.TITLE) == [upper, lower]


@pytest.mark.parametrize("direction", list(SortDirection))
def test_sort_puts_missing_values_first(direction):
    dated = _article(1, date=date(2022, 1, 2))
    undated = _article(2)
    other = _article(3, date=date(2022, 1, 1))
    result = sort_articles([dated, undated, other], ArticleSortField.DATE, direction)
    assert result[0] is undated


def test_sort_descending_reverses_present_values():
    first = _article(1, date=date(2022, 1, 1))
    second = _article(2, date=date(2022, 1, 2))
    missing = _article(3)
    assert sort_articles([first, second, missing], "date", "desc") == [missing, second, first]


@pytest.mark.parametrize("direction", list(SortDirection))
def test_sort_breaks_ties_by_id(direction):
    a = _article(3, author="Same")
    b = _article(1, author="Same")
    c = _article(2, author="Same")
    assert sort_articles([a, b, c], ArticleSortField.AUTHOR, direction) == [b, c, a]


@pytest.mark.parametrize(
    "order, expected",
    [
        ("title", (ArticleSortField.TITLE, SortDirection.ASC)),
        ("author:desc", (ArticleSortField.AUTHOR, SortDirection.DESC)),
        ("-date", (ArticleSortField.DATE, SortDirection.DESC)),
        (" Content:ASC ", (ArticleSortField.CONTENT, SortDirection.ASC)),
    ],
)
def test_parse_order(order, expected):
    assert parse_order(order) == expected


@pytest.mark.parametrize("order", ["id", "title:sideways", ""])
def test_parse_order_rejects_unknown(order):
    with pytest.raises(ValueError):
        parse_order(order)


# ── Search ───────────────────────────────────────────────────────────


def test_search_matches_title_or_content():
    article = _article(1, title="Another Article", content="Lorem ipsum dolor sit amet.")
    assert matches_query(article, "Another")
    assert matches_query(article, "ipsum dolor")
    assert not matches_query(article, "ipsum amet")


def test_search_is_case_sensitive_unless_asked():
    article = _article(1, title="Sample Article")
    assert not matches_query(article, "sample")
    assert matches_query(article, "sample", case_sensitive=False)


def test_empty_query_matches_everything():
    articles = [_article(1), _article(2)]
    assert filter_articles(articles, "") == articles


def test_missing_text_never_matches():
    assert not matches_query(Article(title=None, content=None), "x")

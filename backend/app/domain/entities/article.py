"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import date as date_type, datetime, timezone
from typing import Any

from app.domain.validation import presence_errors

MUTABLE_FIELDS = ("title", "content", "author", "date")


def coerce_date(value: date_type | None) -> date_type | None:
    """Truncate a datetime to its calendar date; dates and None pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(eq=False)
class Article:
    """Core domain entity representing a published article.

    ``author`` and ``date`` are optional; ``None`` means absent, which is
    not the same thing as an empty string. Identity follows the persisted
    id, the same way two rows with one primary key are one record.
    """

    title: str | None
    content: str | None
    author: str | None = None
    date: date_type | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        self.date = coerce_date(self.date)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Article):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return id(self)
        return hash((Article, self.id))

    @property
    def errors(self) -> dict[str, list[str]]:
        return presence_errors({"title": self.title, "content": self.content})

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def update(self, **changes: Any) -> None:
        """Merge the given fields in place and refresh the updated_at timestamp."""
        unknown = set(changes) - set(MUTABLE_FIELDS)
        if unknown:
            raise TypeError(f"Unknown article field(s): {', '.join(sorted(unknown))}")
        for name, value in changes.items():
            if name == "date":
                value = coerce_date(value)
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)

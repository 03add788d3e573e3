"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import date as date_type, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator


def _truncate_datetime(value: Any) -> Any:
    """Accept a date-time wherever a date is expected and keep only the date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10:
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            return value
    return value


class ArticleCreate(BaseModel):
    """Schema for creating a new article.

    Title and content are optional here on purpose: presence is checked by
    the domain so an invalid article comes back with its ``errors``.
    """

    title: str | None = Field(None, examples=["Sample Article"])
    content: str | None = Field(None, examples=["Lorem ipsum dolor sit amet."])
    author: str | None = Field(None, examples=["John Doe"])
    date: date_type | None = Field(None, examples=["2022-01-01"])

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Any:
        return _truncate_datetime(value)


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — only fields that are sent get applied.

    Sending ``"author": null`` clears the author; leaving it out keeps it.
    """

    title: str | None = None
    content: str | None = None
    author: str | None = None
    date: date_type | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Any:
        return _truncate_datetime(value)

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    content: str
    author: str | None
    date: date_type | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ArticleCount(BaseModel):
    count: int

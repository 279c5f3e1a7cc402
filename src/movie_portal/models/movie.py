from typing import Any

from pydantic import BaseModel, Field


class MovieFields(BaseModel):
    title: str
    actors: list[str] = Field(min_length=1)
    year: int


class Movie(MovieFields):
    id: str

    @classmethod
    def from_document(cls, doc_id: str, source: dict) -> "Movie":
        return cls(id=doc_id, **source)


class MovieIn(BaseModel):
    """Inbound payload as sent by the UI, before normalization."""

    id: str | None = None
    title: str | None = None
    actors: str | list[str] | None = None
    # year проверяется в validation.coerce_year, без приведения типов pydantic
    year: Any = Field(default=None, examples=[2010, "2010"])

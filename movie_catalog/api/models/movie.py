"""
Pydantic schemas for Movie API.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import date, datetime, timezone

from pydantic import BaseModel, Field, AnyUrl, TypeAdapter, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

_url_adapter = TypeAdapter(AnyUrl)
ALLOWED_URL_SCHEMES = {"http", "https", "ftp"}


def check_poster_url(value: str | None) -> str | None:
    """Accept None, empty string, or an absolute http/https/ftp URL."""
    if not value:
        return value
    try:
        url = _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError("Please provide a valid URL for the poster")
    if url.scheme not in ALLOWED_URL_SCHEMES or not url.host:
        raise ValueError("Please provide a valid URL for the poster")
    return value


class MovieCreate(BaseModel):
    """Request body for creating a movie."""

    title: str = Field(..., min_length=1, max_length=200)
    director: str = Field(..., min_length=1, max_length=100)
    genre: str = Field(..., min_length=1, max_length=50)
    release_date: date
    duration: int | None = None
    rating: float | None = Field(None, ge=0.0, le=10.0)
    description: str | None = None
    poster_url: str | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("title", "director", "genre")
    @classmethod
    def not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(f"The {info.field_name} field is required.")
        return value

    @field_validator("poster_url")
    @classmethod
    def valid_poster_url(cls, value: str | None) -> str | None:
        return check_poster_url(value)


class MovieUpdate(BaseModel):
    """Request body for updating a movie (all fields optional)."""

    title: str | None = Field(None, max_length=200)
    director: str | None = Field(None, max_length=100)
    genre: str | None = Field(None, max_length=50)
    release_date: date | None = None
    duration: int | None = None
    rating: float | None = Field(None, ge=0.0, le=10.0)
    description: str | None = None
    poster_url: str | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("poster_url")
    @classmethod
    def valid_poster_url(cls, value: str | None) -> str | None:
        return check_poster_url(value)


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: int
    title: str
    director: str
    genre: str
    release_date: date
    duration: int | None = None
    rating: float | None = None
    description: str | None = None
    poster_url: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("created_at", "updated_at")
    @classmethod
    def as_utc(cls, value: datetime) -> datetime:
        # Stored naive; always UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class PaginationInfo(BaseModel):
    """Pagination metadata for a movie listing."""

    page: int
    page_size: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class MovieList(BaseModel):
    """Response model for one page of movies."""

    movies: list[MovieResponse]
    pagination: PaginationInfo

"""
Pydantic schemas for API request/response validation.
"""

from movie_catalog.api.models.movie import (
    MovieCreate,
    MovieUpdate,
    MovieResponse,
    PaginationInfo,
    MovieList,
)

__all__ = [
    "MovieCreate",
    "MovieUpdate",
    "MovieResponse",
    "PaginationInfo",
    "MovieList",
]

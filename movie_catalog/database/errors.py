"""
Error kinds raised by the catalog store.

The API layer maps these onto HTTP status codes: ValidationError -> 400,
NotFoundError -> 404, ConflictError -> 409, anything else -> 500.
"""


class CatalogError(Exception):
    """Base class for all catalog errors."""


class ValidationError(CatalogError, ValueError):
    """A field is missing, oversized or out of range."""


class NotFoundError(CatalogError, LookupError):
    """No movie exists with the requested id."""

    def __init__(self, movie_id: int):
        self.movie_id = movie_id
        super().__init__(f"Movie with ID {movie_id} not found")


class ConflictError(CatalogError):
    """A movie with the same title and director already exists."""

    def __init__(self, message: str = "A movie with the same title and director already exists"):
        super().__init__(message)


class UnexpectedError(CatalogError):
    """Store or infrastructure failure."""

"""
Database module for the movie catalog.

This module provides the ORM model, connection management, CRUD operations
and error kinds for the catalog store using SQLAlchemy ORM.
"""

from movie_catalog.database.models import Base, Movie
from movie_catalog.database.connection import DatabaseManager, get_database_url
from movie_catalog.database.init_db import init_database, seed_movies, verify_schema
from movie_catalog.database.errors import (
    CatalogError,
    ValidationError,
    NotFoundError,
    ConflictError,
    UnexpectedError,
)
from movie_catalog.database import crud

__all__ = [
    # Models
    'Base',
    'Movie',
    # Connection
    'DatabaseManager',
    'get_database_url',
    # Initialization
    'init_database',
    'seed_movies',
    'verify_schema',
    # Errors
    'CatalogError',
    'ValidationError',
    'NotFoundError',
    'ConflictError',
    'UnexpectedError',
    # CRUD module
    'crud',
]

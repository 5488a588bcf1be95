"""
FastAPI dependency injection for the database session.
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session

from movie_catalog.database.connection import DatabaseManager


def get_db_manager(request: Request) -> DatabaseManager:
    """Return the DatabaseManager the application was built with."""
    return request.app.state.db_manager


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    with get_db_manager(request).session_scope() as session:
        yield session

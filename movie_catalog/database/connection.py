"""
Database connection management using SQLAlchemy.

This module handles engine creation and session management. There is no
module-level manager: callers construct a DatabaseManager and pass it
(or sessions made from it) to whatever needs the store.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Generator
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from movie_catalog.database.models import Base

logger = logging.getLogger(__name__)


# Default database path
DEFAULT_DB_PATH = "data/movies.db"

IN_MEMORY_URL = "sqlite://"


def get_database_url(db_path: str = DEFAULT_DB_PATH) -> str:
    """
    Get SQLite database URL.

    Args:
        db_path: Path to SQLite database file

    Returns:
        SQLAlchemy database URL
    """
    # Ensure directory exists
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)

    # SQLite URL format: sqlite:///path/to/database.db
    return f"sqlite:///{os.path.abspath(db_path)}"


def _casefold(value):
    return value.casefold() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def register_sqlite_functions(dbapi_conn, connection_record):
    """
    Register a Unicode-aware casefold() SQL function on SQLite connections.

    SQLite's built-in lower() only folds ASCII letters; the catalog's
    case-insensitive comparisons go through casefold() instead.
    """
    if isinstance(dbapi_conn, sqlite3.Connection):
        dbapi_conn.create_function("casefold", 1, _casefold, deterministic=True)


class DatabaseManager:
    """
    Database connection manager.

    Handles engine creation, session management, and table creation.
    """

    def __init__(self, database_url: str | None = None, echo: bool = False):
        """
        Initialize database manager.

        Args:
            database_url: SQLAlchemy URL; defaults to the SQLite file at DEFAULT_DB_PATH
            echo: If True, log all SQL statements (useful for debugging)
        """
        self.database_url = database_url or get_database_url(DEFAULT_DB_PATH)

        engine_kwargs = {"echo": echo}
        if self.database_url.startswith("sqlite"):
            # StaticPool keeps a single connection so in-memory databases survive
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(self.database_url, **engine_kwargs)

        # Create session factory
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )
        logger.debug("Database engine created for %s", self.engine.url.render_as_string(hide_password=True))

    @classmethod
    def in_memory(cls, echo: bool = False) -> "DatabaseManager":
        """Create a manager backed by a private in-memory SQLite database."""
        return cls(IN_MEMORY_URL, echo=echo)

    def create_tables(self):
        """
        Create all tables defined in the models.

        This creates tables if they don't exist. Existing tables are not modified.
        """
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        """
        Drop all tables defined in the models.

        WARNING: This will delete all data in the database!
        """
        Base.metadata.drop_all(bind=self.engine)

    def reset_database(self):
        """
        Drop and recreate all tables.

        WARNING: This will delete all data in the database!
        """
        self.drop_tables()
        self.create_tables()

    def get_session(self) -> Session:
        """
        Get a new database session.

        Remember to close the session when done, or use session_scope().
        """
        return self.SessionLocal()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Automatically commits on success and rolls back on failure.

        Usage:
            with db_manager.session_scope() as session:
                crud.create_movie(session, ...)

        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()

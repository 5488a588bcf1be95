"""
SQLAlchemy ORM models for the movie catalog database.

This module defines the single Movie table. Uniqueness of the
(title, director) pair is enforced in crud.create_movie, not by a
table constraint.
"""

from datetime import date, datetime, timezone
from typing import Optional
from sqlalchemy import Integer, String, Text, Date, DateTime, Numeric, CheckConstraint, Index
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql.functions import GenericFunction


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (SQLite stores no offset)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class casefold(GenericFunction):
    """
    Unicode-aware case folding for comparisons.

    Compiles to the casefold() function registered on SQLite connections
    (see connection.register_sqlite_functions) and to lower() elsewhere.
    """
    type = String()
    inherit_cache = True


@compiles(casefold)
def _compile_casefold(element, compiler, **kw):
    return "lower(%s)" % compiler.process(element.clauses, **kw)


@compiles(casefold, "sqlite")
def _compile_casefold_sqlite(element, compiler, **kw):
    return "casefold(%s)" % compiler.process(element.clauses, **kw)


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table storing one catalog record per row.

    Attributes:
        id: Primary key, auto-incremented
        title: Movie title (required, max 200 chars)
        director: Director name (required, max 100 chars)
        genre: Genre label (required, max 50 chars)
        release_date: Calendar release date (required)
        duration: Running time in minutes (optional)
        rating: Score between 0.0 and 10.0 (optional)
        description: Free-text synopsis (optional)
        poster_url: URL of the poster image (optional)
        created_at: UTC timestamp when record was created
        updated_at: UTC timestamp of the last successful mutation
    """
    __tablename__ = 'movies'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    director: Mapped[str] = mapped_column(String(100), nullable=False)
    genre: Mapped[str] = mapped_column(String(50), nullable=False)
    release_date: Mapped[date] = mapped_column(Date, nullable=False)
    duration: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    rating: Mapped[Optional[float]] = mapped_column(Numeric(3, 1, asdecimal=False), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    poster_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)

    # Constraints and indexes
    __table_args__ = (
        CheckConstraint("rating IS NULL OR (rating >= 0 AND rating <= 10)", name='check_rating_range'),
        Index('idx_movies_title', 'title'),
        Index('idx_movies_genre', 'genre'),
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}', director='{self.director}', genre='{self.genre}')>"

"""
CRUD operations for the Movie model.

This module provides Create, Read, Update, Delete operations for the catalog.
Every function takes an explicit session; nothing here holds connection state.
"""

import logging
from datetime import date
from typing import List, Optional, Tuple
from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from movie_catalog.database.models import Movie, casefold, utcnow
from movie_catalog.database.errors import ValidationError, NotFoundError, ConflictError, UnexpectedError

logger = logging.getLogger(__name__)

MAX_LENGTHS = {'title': 200, 'director': 100, 'genre': 50}
RATING_MIN = 0.0
RATING_MAX = 10.0

# SQLite binds integers as signed 64-bit
SQL_INT_MAX = 2 ** 63 - 1


# ==================== VALIDATION HELPERS ====================

def _validate_required_text(field: str, value: Optional[str]) -> None:
    if value is None or not value.strip():
        raise ValidationError(f"The {field} field is required.")
    if len(value) > MAX_LENGTHS[field]:
        raise ValidationError(f"The {field} field must be at most {MAX_LENGTHS[field]} characters.")


def _validate_rating(rating: Optional[float]) -> None:
    if rating is not None and not (RATING_MIN <= rating <= RATING_MAX):
        raise ValidationError("Rating must be between 0.0 and 10.0")


def _clamp_sql_int(value: int) -> int:
    """Keep a LIMIT/OFFSET value inside the range SQLite can bind."""
    return max(-SQL_INT_MAX, min(SQL_INT_MAX, value))


def _commit(session: Session, action: str) -> None:
    """Commit the session, rolling back and wrapping driver errors."""
    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Database error while %s: %s", action, e)
        raise UnexpectedError(str(e)) from e


# ==================== MOVIE CRUD OPERATIONS ====================

def find_duplicate(session: Session, title: str, director: str) -> Optional[Movie]:
    """
    Find a movie with the same title and director, ignoring case.

    Args:
        session: Database session
        title: Movie title
        director: Director name

    Returns:
        The existing Movie or None
    """
    return session.query(Movie).filter(
        casefold(Movie.title) == title.casefold(),
        casefold(Movie.director) == director.casefold(),
    ).first()


def create_movie(
    session: Session,
    title: str,
    director: str,
    genre: str,
    release_date: date,
    duration: Optional[int] = None,
    rating: Optional[float] = None,
    description: Optional[str] = None,
    poster_url: Optional[str] = None,
) -> Movie:
    """
    Create a new movie.

    The duplicate check and the insert are not isolated from each other,
    so two concurrent writers can still both succeed.

    Args:
        session: Database session
        title: Movie title
        director: Director name
        genre: Genre label
        release_date: Release date
        duration: Running time in minutes
        rating: Score between 0.0 and 10.0
        description: Synopsis; empty string is stored as None
        poster_url: Poster URL; empty string is stored as None

    Returns:
        Created Movie object

    Raises:
        ValidationError: If a required field is blank, too long, or rating is out of range
        ConflictError: If a movie with the same title and director exists
    """
    for field, value in (('title', title), ('director', director), ('genre', genre)):
        _validate_required_text(field, value)
    if release_date is None:
        raise ValidationError("The release_date field is required.")
    _validate_rating(rating)

    if find_duplicate(session, title, director) is not None:
        logger.warning("Duplicate movie rejected: %r by %r", title, director)
        raise ConflictError()

    now = utcnow()
    movie = Movie(
        title=title,
        director=director,
        genre=genre,
        release_date=release_date,
        duration=duration,
        rating=rating,
        description=description or None,
        poster_url=poster_url or None,
        created_at=now,
        updated_at=now,
    )
    session.add(movie)
    _commit(session, "creating movie")
    session.refresh(movie)
    logger.info("Created movie %d: %s", movie.id, movie.title)
    return movie


def get_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Get a movie by ID.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        Movie object or None if not found
    """
    return session.get(Movie, movie_id)


def get_movie_or_raise(session: Session, movie_id: int) -> Movie:
    """Get a movie by ID, raising NotFoundError if absent."""
    movie = get_movie(session, movie_id)
    if movie is None:
        raise NotFoundError(movie_id)
    return movie


def list_movies(
    session: Session,
    search: Optional[str] = None,
    genre: Optional[str] = None,
    page: int = 1,
    page_size: int = 10,
) -> Tuple[List[Movie], int]:
    """
    List movies with optional search, genre filter and pagination.

    Args:
        session: Database session
        search: Case-insensitive substring matched against title, director or genre
        genre: Exact, case-sensitive genre match
        page: 1-based page number; not range-checked
        page_size: Number of movies per page; not range-checked

    Returns:
        Tuple of (movies on the requested page, total matching count)
    """
    query = session.query(Movie)

    if search:
        folded = search.casefold()
        query = query.filter(or_(
            casefold(Movie.title).contains(folded, autoescape=True),
            casefold(Movie.director).contains(folded, autoescape=True),
            casefold(Movie.genre).contains(folded, autoescape=True),
        ))

    if genre:
        query = query.filter(Movie.genre == genre)

    total_count = query.count()
    movies = (
        query.order_by(Movie.title.asc(), Movie.id.asc())
        .offset(_clamp_sql_int((page - 1) * page_size))
        .limit(_clamp_sql_int(page_size))
        .all()
    )
    return movies, total_count


def list_genres(session: Session) -> List[str]:
    """
    Get the sorted distinct genres across all movies.

    Args:
        session: Database session

    Returns:
        List of genre strings in ascending order
    """
    rows = session.query(Movie.genre).distinct().order_by(Movie.genre.asc()).all()
    return [row[0] for row in rows]


def get_movie_count(session: Session) -> int:
    """
    Get total count of movies.

    Args:
        session: Database session

    Returns:
        Total number of movies
    """
    return session.query(func.count(Movie.id)).scalar()


def update_movie(
    session: Session,
    movie_id: int,
    title: Optional[str] = None,
    director: Optional[str] = None,
    genre: Optional[str] = None,
    release_date: Optional[date] = None,
    duration: Optional[int] = None,
    rating: Optional[float] = None,
    description: Optional[str] = None,
    poster_url: Optional[str] = None,
) -> Movie:
    """
    Partially update a movie.

    Empty or None title/director/genre leave the stored value unchanged.
    None leaves release_date, duration, rating, description and poster_url
    unchanged; an empty description or poster_url clears it. updated_at is
    refreshed even when nothing else changes. No duplicate check is made.

    Args:
        session: Database session
        movie_id: Movie ID
        title, director, genre, release_date, duration, rating,
        description, poster_url: Fields to change

    Returns:
        Updated Movie object

    Raises:
        NotFoundError: If the movie does not exist
        ValidationError: If a supplied field is too long or rating is out of range
    """
    movie = get_movie_or_raise(session, movie_id)

    for field, value in (('title', title), ('director', director), ('genre', genre)):
        if value:
            _validate_required_text(field, value)
            setattr(movie, field, value)

    if release_date is not None:
        movie.release_date = release_date
    if duration is not None:
        movie.duration = duration
    if rating is not None:
        _validate_rating(rating)
        movie.rating = rating
    if description is not None:
        movie.description = description or None
    if poster_url is not None:
        movie.poster_url = poster_url or None

    movie.updated_at = utcnow()
    _commit(session, "updating movie")
    session.refresh(movie)
    logger.info("Updated movie %d", movie.id)
    return movie


def delete_movie(session: Session, movie_id: int) -> None:
    """
    Delete a movie permanently.

    Args:
        session: Database session
        movie_id: Movie ID

    Raises:
        NotFoundError: If the movie does not exist
    """
    movie = get_movie_or_raise(session, movie_id)
    session.delete(movie)
    _commit(session, "deleting movie")
    logger.info("Deleted movie %d", movie_id)

"""
Database initialization and schema creation.

This module provides functions to initialize the database schema and
populate it with the sample catalog.
"""

import logging
from datetime import date

from sqlalchemy import inspect

from movie_catalog.database.connection import DatabaseManager
from movie_catalog.database import crud

logger = logging.getLogger(__name__)


SAMPLE_MOVIES = [
    {
        "title": "The Shawshank Redemption",
        "director": "Frank Darabont",
        "genre": "Drama",
        "release_date": date(1994, 9, 23),
        "duration": 142,
        "rating": 9.3,
        "description": "Two imprisoned men bond over a number of years, finding solace and eventual redemption through acts of common decency.",
        "poster_url": "https://example.com/shawshank.jpg",
    },
    {
        "title": "The Godfather",
        "director": "Francis Ford Coppola",
        "genre": "Crime",
        "release_date": date(1972, 3, 24),
        "duration": 175,
        "rating": 9.2,
        "description": "The aging patriarch of an organized crime dynasty transfers control of his clandestine empire to his reluctant son.",
        "poster_url": "https://example.com/godfather.jpg",
    },
    {
        "title": "The Dark Knight",
        "director": "Christopher Nolan",
        "genre": "Action",
        "release_date": date(2008, 7, 18),
        "duration": 152,
        "rating": 9.0,
        "description": "When the menace known as the Joker wreaks havoc and chaos on the people of Gotham, Batman must accept one of the greatest psychological and physical tests.",
        "poster_url": "https://example.com/darkknight.jpg",
    },
    {
        "title": "Pulp Fiction",
        "director": "Quentin Tarantino",
        "genre": "Crime",
        "release_date": date(1994, 10, 14),
        "duration": 154,
        "rating": 8.9,
        "description": "The lives of two mob hitmen, a boxer, a gangster and his wife intertwine in four tales of violence and redemption.",
        "poster_url": "https://example.com/pulpfiction.jpg",
    },
    {
        "title": "The Lord of the Rings: The Fellowship of the Ring",
        "director": "Peter Jackson",
        "genre": "Adventure",
        "release_date": date(2001, 12, 19),
        "duration": 178,
        "rating": 8.8,
        "description": "A meek Hobbit from the Shire and eight companions set out on a journey to destroy the powerful One Ring.",
        "poster_url": "https://example.com/lotr1.jpg",
    },
]


def seed_movies(db_manager: DatabaseManager) -> int:
    """
    Insert the sample movies if the catalog is empty.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        Number of movies inserted
    """
    with db_manager.session_scope() as session:
        if crud.get_movie_count(session) > 0:
            logger.info("Catalog already populated, skipping seed")
            return 0
        for fields in SAMPLE_MOVIES:
            crud.create_movie(session, **fields)
    logger.info("Seeded %d sample movies", len(SAMPLE_MOVIES))
    return len(SAMPLE_MOVIES)


def init_database(db_manager: DatabaseManager, reset: bool = False, seed: bool = True) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        db_manager: DatabaseManager instance
        reset: If True, drop existing tables before creating new ones
        seed: If True, insert the sample movies into an empty catalog

    Returns:
        The same DatabaseManager, for chaining
    """
    if reset:
        logger.info("Resetting database (dropping all tables)...")
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info("Database tables ready")

    if seed:
        seed_movies(db_manager)

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    existing_tables = set(inspect(db_manager.engine).get_table_names())
    missing_tables = {'movies'} - existing_tables

    if missing_tables:
        logger.error("Missing tables: %s", missing_tables)
        return False

    logger.info("All tables exist: %s", existing_tables)
    return True

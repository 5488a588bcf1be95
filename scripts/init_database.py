#!/usr/bin/env python
"""
Database initialization script for the movie catalog.

Creates the schema and, unless told otherwise, inserts the sample movies
into an empty catalog.

Usage:
    # Create tables and seed sample movies
    python scripts/init_database.py

    # Drop everything first
    python scripts/init_database.py --reset

    # Schema only
    python scripts/init_database.py --no-seed

    # Explicit database
    python scripts/init_database.py --db-url sqlite:///data/other.db
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_catalog.api.config import get_database_url_setting, get_log_level
from movie_catalog.database import DatabaseManager, crud, init_database, verify_schema
from movie_catalog.utils.logging_config import setup_logging, get_logger

logger = get_logger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Initialize the movie catalog database")
    parser.add_argument("--reset", action="store_true", help="Drop existing tables before creating them")
    parser.add_argument("--no-seed", action="store_true", help="Do not insert the sample movies")
    parser.add_argument("--db-url", default=None, help="SQLAlchemy database URL (default: DATABASE_URL or data/movies.db)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(level=get_log_level())

    db_manager = DatabaseManager(args.db_url or get_database_url_setting())
    try:
        init_database(db_manager, reset=args.reset, seed=not args.no_seed)
        if not verify_schema(db_manager):
            logger.error("Database initialization failed")
            return 1
        with db_manager.session_scope() as session:
            logger.info("Catalog contains %d movies", crud.get_movie_count(session))
    finally:
        db_manager.close()

    logger.info("Database initialization successful")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
API configuration loaded from environment or defaults.
"""

import os

from movie_catalog.database.connection import DEFAULT_DB_PATH, get_database_url

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://localhost:5174",
    "http://localhost:3000",
    "http://localhost:5093",
    "http://localhost:8501",
)


def get_database_url_setting() -> str:
    """Get SQLAlchemy database URL from env or the default SQLite file."""
    return os.getenv("DATABASE_URL", "") or get_database_url(DEFAULT_DB_PATH)


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get optional log file name."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))


def get_cors_origins() -> list[str]:
    """Get allowed browser origins (comma separated in CORS_ORIGINS)."""
    raw = os.getenv("CORS_ORIGINS", "")
    if not raw.strip():
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_seed_database() -> bool:
    """Whether to insert the sample movies into an empty catalog on startup."""
    return os.getenv("SEED_DATABASE", "true").lower() in ("1", "true", "yes")

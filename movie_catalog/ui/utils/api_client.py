"""
Movie Catalog API client wrapper for Streamlit UI.
"""

import logging
import os
import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response from the API, carrying the server-provided message."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


def _error_message(r: requests.Response) -> str:
    try:
        body = r.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("detail"):
        return str(body["detail"])
    return r.text or r.reason or "Request failed"


def _check(r: requests.Response) -> requests.Response:
    if not r.ok:
        raise ApiError(r.status_code, _error_message(r))
    return r


def get_movies(
    search: str | None = None,
    genre: str | None = None,
    page: int = 1,
    page_size: int = 12,
) -> dict:
    """Get one page of movies with pagination metadata."""
    params = {"page": page, "pageSize": page_size}
    if search:
        params["search"] = search
    if genre:
        params["genre"] = genre
    r = requests.get(f"{get_api_base_url()}/api/movies", params=params, timeout=10)
    return _check(r).json()


def get_movie(movie_id: int) -> dict:
    """Get a single movie."""
    r = requests.get(f"{get_api_base_url()}/api/movies/{movie_id}", timeout=10)
    return _check(r).json()


def create_movie(payload: dict) -> dict:
    """Create a movie from a camelCase payload."""
    r = requests.post(f"{get_api_base_url()}/api/movies", json=payload, timeout=10)
    return _check(r).json()


def update_movie(movie_id: int, changes: dict) -> dict:
    """Send only the changed fields of a movie."""
    r = requests.put(f"{get_api_base_url()}/api/movies/{movie_id}", json=changes, timeout=10)
    return _check(r).json()


def delete_movie(movie_id: int) -> None:
    """Delete a movie."""
    r = requests.delete(f"{get_api_base_url()}/api/movies/{movie_id}", timeout=10)
    _check(r)


def get_genres() -> list[str]:
    """Get the distinct genres."""
    r = requests.get(f"{get_api_base_url()}/api/movies/genres", timeout=10)
    return _check(r).json()


def get_genres_or_empty() -> list[str]:
    """Get genres for the filter dropdown; failures degrade to an empty list."""
    try:
        return get_genres()
    except (ApiError, requests.RequestException) as e:
        logger.warning("Failed to load genres: %s", e)
        return []


def health_check() -> dict:
    """Check API health."""
    r = requests.get(f"{get_api_base_url()}/api/health", timeout=5)
    r.raise_for_status()
    return r.json()

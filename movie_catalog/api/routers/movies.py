"""
Movie API endpoints.
"""

import logging
from contextlib import contextmanager

from fastapi import APIRouter, Depends, Query, HTTPException, Response, status
from sqlalchemy.orm import Session

from movie_catalog.api.dependencies import get_db
from movie_catalog.api.models.movie import (
    MovieCreate,
    MovieUpdate,
    MovieResponse,
    MovieList,
    PaginationInfo,
)
from movie_catalog.database import crud
from movie_catalog.database.errors import ValidationError, NotFoundError, ConflictError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/movies", tags=["movies"])


@contextmanager
def failure_boundary(action: str):
    """Translate store errors into HTTP errors; anything unexpected becomes a 500."""
    try:
        yield
    except HTTPException:
        raise
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.exception("Error %s", action)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error {action}: {e}",
        )


def build_pagination(page: int, page_size: int, total_count: int) -> PaginationInfo:
    """Compute pagination metadata; a non-positive page size yields zero pages."""
    # Integer ceiling; page_size is unbounded and may exceed float precision
    total_pages = -(-total_count // page_size) if page_size > 0 else 0
    return PaginationInfo(
        page=page,
        page_size=page_size,
        total_count=total_count,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )


@router.get("", response_model=MovieList)
def list_movies(
    search: str | None = Query(None),
    genre: str | None = Query(None),
    page: int = Query(1),
    page_size: int = Query(10, alias="pageSize"),
    db: Session = Depends(get_db),
):
    """List movies with search, genre filter and pagination."""
    with failure_boundary("retrieving movies"):
        movies, total_count = crud.list_movies(
            db, search=search, genre=genre, page=page, page_size=page_size
        )
        return MovieList(
            movies=[MovieResponse.model_validate(m) for m in movies],
            pagination=build_pagination(page, page_size, total_count),
        )


@router.get("/genres", response_model=list[str])
def list_genres(db: Session = Depends(get_db)):
    """List the distinct genres, for filter dropdowns."""
    with failure_boundary("retrieving genres"):
        return crud.list_genres(db)


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: int, db: Session = Depends(get_db)):
    """Get movie details by ID."""
    with failure_boundary("retrieving movie"):
        return crud.get_movie_or_raise(db, movie_id)


@router.post("", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
def create_movie(movie_in: MovieCreate, response: Response, db: Session = Depends(get_db)):
    """Create a movie; 409 if the title and director are already catalogued."""
    with failure_boundary("creating movie"):
        movie = crud.create_movie(db, **movie_in.model_dump())
        response.headers["Location"] = f"{router.prefix}/{movie.id}"
        return movie


@router.put("/{movie_id}", response_model=MovieResponse)
def update_movie(movie_id: int, movie_in: MovieUpdate, db: Session = Depends(get_db)):
    """Apply the supplied fields to a movie."""
    with failure_boundary("updating movie"):
        return crud.update_movie(db, movie_id, **movie_in.model_dump())


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(movie_id: int, db: Session = Depends(get_db)):
    """Delete a movie permanently."""
    with failure_boundary("deleting movie"):
        crud.delete_movie(db, movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

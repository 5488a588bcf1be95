"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from movie_catalog.api.dependencies import get_db
from movie_catalog.database import crud

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check: database reachable and movie count."""
    try:
        movie_count = crud.get_movie_count(db)
    except Exception as e:
        return {"status": "unhealthy", "database": str(e)}
    return {
        "status": "healthy",
        "database": "connected",
        "movies": movie_count,
    }

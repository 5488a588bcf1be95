"""
FastAPI application entry point for the Movie Catalog API.

Run: uvicorn movie_catalog.api.main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from movie_catalog.api.config import (
    get_api_host,
    get_api_port,
    get_cors_origins,
    get_database_url_setting,
    get_log_file,
    get_log_level,
    get_seed_database,
)
from movie_catalog.api.routers import movies, system
from movie_catalog.database.connection import DatabaseManager
from movie_catalog.database.init_db import init_database
from movie_catalog.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400 with the first message as detail."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    detail = errors[0]["msg"] if errors else "Validation failed"
    return JSONResponse(status_code=400, content={"detail": detail, "errors": errors})


def create_app(
    db_manager: DatabaseManager | None = None,
    seed: bool | None = None,
    configure_logging: bool = False,
) -> FastAPI:
    """
    Build the API application.

    Args:
        db_manager: Store handle to serve from; created from DATABASE_URL at startup if None
        seed: Insert sample movies into an empty catalog (defaults to SEED_DATABASE)
        configure_logging: Install console/file logging handlers from LOG_LEVEL/LOG_FILE

    Returns:
        Configured FastAPI application
    """
    if seed is None:
        seed = get_seed_database()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if configure_logging:
            configure_api_logging(level=get_log_level(), log_file=get_log_file())
        owns_manager = app.state.db_manager is None
        if owns_manager:
            app.state.db_manager = DatabaseManager(get_database_url_setting())
        logger.info("Starting Movie Catalog API...")
        init_database(app.state.db_manager, seed=seed)
        yield
        if owns_manager:
            app.state.db_manager.close()
            app.state.db_manager = None
        logger.info("Movie Catalog API stopped")

    app = FastAPI(
        title="Movie Catalog API",
        description="REST API for browsing and managing a movie catalog",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.db_manager = db_manager

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(movies.router)
    app.include_router(system.router)

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "message": "Movie Catalog API",
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


app = create_app(configure_logging=True)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())

"""
Main entrypoint for the Social Media API.

This module assembles the FastAPI application: it sets up logging,
records which database file the request handlers use and includes the
API router.  ``create_app`` builds the app; a default instance is
created at import time as ``app`` so it can be served with::

    uvicorn social_media_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import settings
from .core.db import get_database_path, init_db
from .core.logging_config import setup_logging


def create_app(database_path: Optional[str] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    database_path : Optional[str]
        SQLite file to use instead of ``settings.database_url``.

    Returns
    -------
    FastAPI
        A configured application.  The schema is migrated on startup.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    resolved_path = get_database_path(database_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Creates the database file on first start.
        init_db(resolved_path)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.database_path = resolved_path
    app.include_router(router)
    return app


app = create_app()

"""
Main entrypoint for the Employee Directory API.

This module assembles the FastAPI application, sets up logging and
wires the database, repository and service together.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn::

    uvicorn employee_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.exceptions import RecordStoreError
from .core.logging_config import setup_logging
from .repositories.employee_repository import SQLiteEmployeeRepository
from .services.employee_service import EmployeeService


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to build the app with.  Defaults to the module-level
        settings read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so that the wiring below can log.
    setup_logging(settings)

    database = Database(settings.database_url)
    repository = SQLiteEmployeeRepository(database)
    employee_service = EmployeeService(repository=repository, database=database)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Creates the database file if it does not exist and brings the
        # schema up to date.
        database.init_db()
        logger.info("Employee store ready at %s", database.path)
        yield
        logger.info("Shutting down %s", settings.project_name)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.database = database
    app.state.employee_repository = repository
    app.state.employee_service = employee_service

    @app.exception_handler(RecordStoreError)
    async def record_store_error_handler(request: Request, exc: RecordStoreError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Record store error"},
        )

    @app.get("/health", tags=["health"])
    async def health() -> Dict[str, Any]:
        """Report whether the record store is reachable."""
        if not database.ping():
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Database is not reachable",
            )
        return {"status": "healthy", "database": "connected"}

    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

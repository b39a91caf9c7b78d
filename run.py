"""Entry point for the Employee Directory API.

Starts the FastAPI application with Uvicorn.  Host, port and log level
are read from environment variables (``API_HOST``, ``API_PORT``,
``LOG_LEVEL``); the database location comes from ``DATABASE_URL``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from employee_api.app.core.config import settings
from employee_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
        access_log=settings.debug,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

"""Entry point for the Work Tracker API.

Launches the FastAPI application with uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Configuration such as DATABASE_URL, LOG_LEVEL, HOST and PORT is read
from environment variables (see ``work_tracker_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from work_tracker_api.app.core.config import settings
from work_tracker_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    try:
        await server.serve()
    except Exception:
        logging.exception("Work Tracker API stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

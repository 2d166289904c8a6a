"""Entry point for the Army Roster API.

Serves ``roster_api.app.main:app`` with Uvicorn.  The bind address and
dataset location come from ``roster_api.app.core.config.Settings``
(``HOST``, ``PORT`` and ``DATASET_PATH`` environment variables).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from roster_api.app.core.config import settings
from roster_api.app.core.logging_config import uvicorn_log_level
from roster_api.app.main import app


async def main() -> None:
    """Start the API server and run until interrupted."""
    logging.getLogger("roster_api.run").info(
        "Serving %s on %s:%s", settings.dataset_path, settings.host, settings.port
    )
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=uvicorn_log_level(settings.log_level))
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

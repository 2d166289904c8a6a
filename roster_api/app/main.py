"""
Main entrypoint for the Army Roster API.

This module assembles the FastAPI application, sets up logging and
includes the routers.  ``create_app`` builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn roster_api.app.main:app --reload

Tests call ``create_app`` directly with their own ``Settings`` so that
each one can point the service at a temporary dataset file.
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.dataset import DatasetLoader
from .core.logging_config import setup_logging
from .services.unit_service import UnitService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the modules below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    # The loader and service hold no mutable state, so a single instance
    # is shared by all requests.
    app.state.settings = settings
    app.state.unit_service = UnitService(DatasetLoader(settings.dataset_path))

    app.include_router(router)
    return app


app = create_app()

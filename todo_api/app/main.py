"""
Main entrypoint for the ToDo API.

This module assembles the FastAPI application, sets up logging, wires
the repository and service together and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn todo_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .repositories import InMemoryToDoStore, ToDoRepository
from .services.todo_service import ToDoService


def create_app(repository: Optional[ToDoRepository] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    repository : Optional[ToDoRepository]
        Backend used to store to-do items.  A fresh ``InMemoryToDoStore``
        is created when omitted, so every app instance owns its own data.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file, settings.log_format)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if repository is None:
        repository = InMemoryToDoStore()
    app.state.todo_service = ToDoService(repository)

    app.include_router(v1_router, prefix=settings.api_prefix)

    logging.getLogger(__name__).info(
        "%s %s ready (repository: %s)",
        settings.project_name,
        settings.api_version,
        type(repository).__name__,
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

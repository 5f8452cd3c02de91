"""
Main entrypoint for the Phone Store API.

This module assembles the FastAPI application, sets up logging,
middleware and the phone store, and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn phone_store_api.app.main:app --reload

Tests build their own instance with ``create_app(settings, store)`` so
that each one works against its own collection.
"""

import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .api.v1.router import router as v1_router
from .core.config import Settings
from .core.config import settings as default_settings
from .core.logging_config import setup_logging
from .core.middleware import (
    AccessLogMiddleware,
    SecurityHeadersMiddleware,
    generic_error_response,
)
from .core.store import JSONFilePhoneStore, PhoneStore


logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[PhoneStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the module-level settings
        read from the environment.
    store : Optional[PhoneStore]
        Backing store for the phone collection; defaults to the JSON
        file at ``settings.phones_file``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else JSONFilePhoneStore(settings.phones_file)

    # Last added is outermost.  The access log turns route errors into the
    # generic 500 inside CORS and the security headers.
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
        logger.error(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return generic_error_response()

    app.include_router(v1_router)

    # Static assets are mounted after the API so the routes above win.
    if os.path.isdir(settings.public_dir):
        app.mount("/", StaticFiles(directory=settings.public_dir), name="public")
    else:
        logger.warning("Static directory %s not found; not serving assets", settings.public_dir)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

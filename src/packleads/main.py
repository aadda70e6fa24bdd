"""The main application factory for the Packleads service.

Notes
-----
Be aware that, following the normal pattern for FastAPI services, the app is
constructed when this module is loaded and is not deferred until a function
is called.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from importlib.metadata import version

import structlog
from fastapi import FastAPI

from .config import Config, config
from .dependencies.config import config_dependency
from .dependencies.contact import contact_service_dependency
from .exceptions import ClientRequestError, client_request_error_handler
from .handlers.external import external_router
from .handlers.internal import internal_router
from .logging import configure_logging

__all__ = ["app", "create_app"]


def create_app(app_config: Config | None = None) -> FastAPI:
    """Create the Packleads FastAPI application.

    Parameters
    ----------
    app_config
        Configuration to use, defaulting to the global configuration.
    """
    app_config = app_config or config
    config_dependency.set_config(app_config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        contact_service_dependency.initialize(
            app_config.contact_rate_limit, app_config.contact_rate_window
        )
        logger = structlog.get_logger(app_config.name)
        logger.info("Packleads started", base_url=app_config.site_url)
        yield

    configure_logging(
        name=app_config.name,
        profile=app_config.profile,
        log_level=app_config.log_level,
    )

    app = FastAPI(
        title="Packleads",
        description=(
            "Page metadata, crawler documents, and public forms for the"
            " Packleads site"
        ),
        version=version("packleads"),
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )
    app.include_router(internal_router)
    app.include_router(external_router)
    app.exception_handler(ClientRequestError)(client_request_error_handler)
    return app


app = create_app()
"""The main FastAPI application for Packleads."""

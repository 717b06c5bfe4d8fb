"""Application factory wiring middleware, error handlers and routers."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..container import Container
from ..domain.errors import ItineraryError
from .errors import handle_itinerary_error
from .middleware import install_request_context
from .routes import health_router, itinerary_router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Build the FastAPI application around a dependency container.

    Args:
        container: Wiring to serve requests with. A default production
            container is built when omitted.
    """
    container = container or Container.create_default()
    config = container.config

    app = FastAPI(
        title="Flight Itinerary API",
        version=config.version,
        description="Reconstructs ordered itineraries from unordered flight tickets.",
        docs_url=config.server.docs_url,
    )
    app.state.container = container

    install_request_context(app)

    origins = list(config.server.allowed_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ItineraryError, handle_itinerary_error)

    app.include_router(health_router, prefix=config.api_prefix)
    app.include_router(itinerary_router, prefix=config.api_prefix)

    return app

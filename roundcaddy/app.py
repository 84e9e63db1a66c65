from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roundcaddy import __version__
from roundcaddy.api.health import health as _health_handler
from roundcaddy.api.routers.geo import router as geo_router
from roundcaddy.api.routers.sg import router as sg_router
from roundcaddy.config import get_settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="RoundCaddy", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_api_route("/health", _health_handler, methods=["GET"])
    app.include_router(sg_router)
    app.include_router(geo_router)

    if settings.require_api_key and not settings.api_key:
        logger.warning("REQUIRE_API_KEY is set but API_KEY is empty; all calls 401")
    return app


app = create_app()

__all__ = ["app", "create_app"]

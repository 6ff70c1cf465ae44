from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from app.api.router import api_router, meta_router
from app.clients.openweather import OpenWeatherClient
from app.core.config import Settings, load_settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import configure_logging
from app.db.influx import create_influx_client

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.settings = settings
        app.state.influx_client = create_influx_client(settings)
        app.state.openweather_client = OpenWeatherClient(
            api_key=settings.openweather_api_key,
            timeout_seconds=settings.openweather_timeout_seconds,
            base_url=str(settings.openweather_base_url),
            country_code=settings.country_code,
            units=settings.units,
        )
        logger.info("India weather API started (env=%s)", settings.env)
        yield
        app.state.openweather_client.close()
        app.state.influx_client.close()
        logger.info("India weather API stopped")

    docs_enabled = settings.docs_enabled and not settings.is_production
    app = FastAPI(
        title="India Weather API",
        version="0.1.0",
        debug=settings.debug,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(GZipMiddleware, minimum_size=1024)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    if settings.trusted_hosts:
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.trusted_hosts)

    @app.middleware("http")
    async def security_headers(request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if settings.is_production:
            response.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return response

    register_exception_handlers(app)
    app.include_router(meta_router)
    app.include_router(api_router)
    return app

"""
FastAPI application entry point.
Challenge: Mount routes, middleware (Prometheus), envelope error handlers, startup table creation.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from villa_api.config import get_settings
from villa_api.api.router import api_router
from villa_api.core.exceptions import VillaAPIError, format_validation_error
from villa_api.db import models  # noqa: F401 - register tables on Base.metadata
from villa_api.db.session import create_tables
from villa_api.schemas.response import APIResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: create missing tables when enabled."""
    if get_settings().create_tables_on_startup:
        await create_tables()
        logger.info("Database tables ensured")
    yield


async def villa_api_error_handler(request: Request, exc: VillaAPIError):
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc)
    return APIResponse.failure(exc.status_code, exc.messages).to_response()


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and path parameters are 400s, not FastAPI's default 422."""
    messages = [format_validation_error(err) for err in exc.errors()]
    return APIResponse.failure(status.HTTP_400_BAD_REQUEST, messages).to_response()


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(
        title=settings.app_name,
        description="CRUD API for villas: list, get, create, update, patch, delete.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(VillaAPIError, villa_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()

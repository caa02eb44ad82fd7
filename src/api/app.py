"""FastAPI application factory for the token scanner API."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.middleware.cors import CORSMiddleware

from config.settings import settings
from src.api.middleware import SecurityHeadersMiddleware

API_VERSION = "0.1.0"

# Rate limiter (shared instance)
limiter = Limiter(key_func=get_remote_address)


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort 500 for failures outside a route body (e.g. building dependencies)."""
    logger.opt(exception=exc).error(f"[API] Unhandled error on {request.method} {request.url.path}")
    return JSONResponse({"error": "Failed to analyze contract"}, status_code=500)


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    app = FastAPI(
        title="Rugscan Token Risk API",
        version=API_VERSION,
        docs_url="/api/docs" if settings.api_debug else None,
        redoc_url=None,
        openapi_url="/api/openapi.json" if settings.api_debug else None,
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    # Security headers
    app.add_middleware(SecurityHeadersMiddleware)

    origins = [o.strip() for o in settings.api_cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    from src.api.routers.analyze import router as analyze_router
    from src.api.routers.health import router as health_router

    app.include_router(health_router)
    app.include_router(analyze_router)

    return app

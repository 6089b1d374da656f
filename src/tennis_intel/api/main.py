"""
FastAPI application for Tennis Intel.

Serves the priced tennis capabilities over HTTP:
- Entrypoint listing and invocation
- ERC-8004 / A2A discovery documents
- msgspec JSON serialization
- Consistent error envelopes for validation and upstream failures
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

import msgspec
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from ..core.config import Settings, get_settings
from ..core.http import ExternalAPIError
from ..services.context import AgentContext, build_context
from .capabilities import build_registry
from .errors import (
    APIError,
    api_error_handler,
    request_validation_error_handler,
    upstream_error_handler,
)
from .routers import discovery, entrypoints

logger = logging.getLogger(__name__)


class MSGSpecResponse(Response):
    """Custom response class using msgspec for ultra-fast JSON serialization."""

    media_type = "application/json"

    def render(self, content: Any) -> bytes:
        """
        Serialize content using msgspec (4-5x faster than stdlib json).

        Args:
            content: Content to serialize

        Returns:
            Serialized JSON bytes
        """
        if content is None:
            return b""
        return msgspec.json.encode(content)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.

    Shutdown:
    - Close the ESPN HTTP client
    """
    ctx: AgentContext = app.state.context
    logger.info(
        f"Starting {ctx.settings.app_name} v{ctx.settings.app_version} "
        f"({len(app.state.registry)} entrypoints, analytics={'on' if ctx.tracker else 'off'})"
    )

    yield

    logger.info(f"Shutting down {ctx.settings.app_name}...")
    try:
        await ctx.close()
    except Exception as e:
        logger.warning(f"Error closing ESPN client: {e}")


def create_app(
    settings: Settings | None = None,
    context: AgentContext | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use (defaults to environment settings)
        context: Prebuilt agent context (defaults to one built from settings)

    Returns:
        Configured FastAPI application instance
    """
    if context is None:
        context = build_context(settings or get_settings())
    settings = context.settings

    app = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=settings.app_version,
        default_response_class=MSGSpecResponse,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.context = context
    app.state.registry = build_registry()

    # CORS middleware - allows web clients to access the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
        expose_headers=settings.cors_expose_headers,
    )

    # GZip compression middleware - compresses responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    @app.middleware("http")
    async def add_performance_headers(request: Request, call_next):
        """Add timing header to all responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = (time.time() - start_time) * 1000  # Convert to ms
        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"
        return response

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(ExternalAPIError, upstream_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with consistent format."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        # Never leak exception details in production, regardless of DEBUG flag
        show_detail = settings.debug and settings.environment != "production"
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An internal error occurred",
                    "detail": str(exc) if show_detail else None,
                }
            },
        )

    @app.get("/health", tags=["health"])
    async def health_check():
        """Basic health check endpoint."""
        return {"status": "healthy", "timestamp": datetime.now(tz=timezone.utc).isoformat()}

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with service information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "description": settings.app_description,
            "status": "running",
            "docs": "/docs",
            "entrypoints": "/entrypoints/",
        }

    # Capabilities - priced entrypoints backed by ESPN data
    app.include_router(entrypoints.router, prefix="/entrypoints", tags=["entrypoints"])
    # Discovery - icon, ERC-8004 registration, A2A agent card
    app.include_router(discovery.router, tags=["discovery"])

    return app

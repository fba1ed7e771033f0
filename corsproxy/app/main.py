"""
FastAPI CORS Proxy Application Factory
======================================

This is the main entry point for the forwarding proxy that lets browser
clients fetch cross-origin resources through the server.

Architecture:
    Browser → CORS Proxy (this service) → Upstream URL

Routers:
    - /proxy        : Fetch ?url=<target> server-side and relay the result
    - /health       : Health check endpoint

Environment Variables (all optional):
    - PORT: Listening port (default: 3000)
    - HOST: Bind address (default: 0.0.0.0)
    - LOG_LEVEL: Logging level (default: INFO)
    - UPSTREAM_TIMEOUT: Outbound timeout in seconds (default: none)
    - FOLLOW_REDIRECTS: Follow upstream redirects (default: true)

Running the Service:
    Development:
        uvicorn corsproxy.app.main:app --reload --port 3000

    Production:
        corsproxy
        PORT=8080 python -m corsproxy.app.main

    With custom log level:
        LOG_LEVEL=DEBUG corsproxy
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from corsproxy.app.config import Settings, get_settings
from corsproxy.app.models import HealthResponse
from corsproxy.app.proxy import UpstreamFetcher, proxy_router
from corsproxy.app.proxy.replies import cors_headers

SERVICE_NAME = "corsproxy"
VERSION = "1.0.0"


# Configure structured JSON logging
def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s", "module": "%(module)s", "function": "%(funcName)s"}',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    # basicConfig does nothing once the Lambda runtime has a root handler
    logging.getLogger().setLevel(log_level.upper())


# Lifespan context manager for startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    There is nothing to initialise or tear down beyond logging; the
    fetcher holds no open connections between requests.
    """
    settings: Settings = app.state.settings

    setup_logging(settings.LOG_LEVEL)
    logger = logging.getLogger("corsproxy.main")

    logger.info(f"CORS proxy server running on {settings.local_url}")

    yield

    logger.info("CORS proxy server shutdown complete")


# Create FastAPI application
def create_app(
    settings: Optional[Settings] = None,
    fetcher: Optional[UpstreamFetcher] = None,
) -> FastAPI:
    """
    Application factory function.

    Args:
        settings: Explicit settings; loaded from the environment when omitted
        fetcher: Outbound fetcher; built from settings when omitted

    Returns:
        FastAPI: Configured application instance
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="CORS Proxy",
        description="Fetches a caller-supplied URL and relays it with permissive CORS headers",
        version=VERSION,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.fetcher = fetcher or UpstreamFetcher.from_settings(settings)

    app.include_router(proxy_router, tags=["Proxy"])

    # Health check endpoint
    @app.get("/health", tags=["System"], response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Liveness probe; never touches the network."""
        return HealthResponse(status="ok", service=SERVICE_NAME, version=VERSION)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Framework errors (404, 405, ...) keep their shape and gain CORS headers."""
        headers = cors_headers()
        if exc.headers:
            headers.update(exc.headers)
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=headers,
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """
        Global exception handler for unhandled errors.

        Logs the error and returns a JSON 500 that still carries CORS headers.
        """
        logger = logging.getLogger("corsproxy.main")
        logger.error(
            f"Unhandled exception: {str(exc)}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "exception_type": type(exc).__name__
            },
            exc_info=True
        )

        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
            headers=cors_headers(),
        )

    return app


# Create app instance for uvicorn
app = create_app()


def run() -> None:
    """Start the standalone server on HOST:PORT."""
    settings = get_settings()

    uvicorn.run(
        "corsproxy.app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()

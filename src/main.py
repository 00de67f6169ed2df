"""
Bank Services - Main Application Entry Point

One code base, three independently deployable services. ``SERVICE_NAME``
selects which of accounts, loans or cards this process serves.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from src import __version__
from src.core.config import settings
from src.core.logging import setup_logging
from src.core.metrics import get_metrics, get_metrics_content_type
from src.infrastructure.database import SERVICE_TABLES, db_manager
from src.presentation.api import build_router
from src.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    register_exception_handlers,
)

SERVICE_DESCRIPTIONS = {
    "accounts": "Customer and bank account management",
    "loans": "Loan management",
    "cards": "Card management",
}


def create_app(service: str | None = None) -> FastAPI:
    """
    Build the ASGI app for one service.

    Args:
        service: ``accounts``, ``loans`` or ``cards``; defaults to
            ``settings.service_name``

    Returns:
        A FastAPI app exposing only that service's endpoints
    """
    service = service or settings.service_name
    if service not in SERVICE_TABLES:
        raise ValueError(f"Unknown service: {service}")

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        Application lifespan manager.

        Handles startup and shutdown events:
        - Set up logging
        - Initialize database connection pool and the service's tables
        - Clean up on shutdown
        """
        setup_logging()
        db_manager.init()
        if settings.db_create_tables:
            await db_manager.create_tables(SERVICE_TABLES[service])

        logger = structlog.get_logger(__name__)
        logger.info("application_started", service=service, version=__version__)

        yield

        await db_manager.close()
        logger.info("application_stopped", service=service)

    app = FastAPI(
        title=f"{service.capitalize()} Service",
        description=SERVICE_DESCRIPTIONS[service],
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestContextMiddleware, service=service)

    register_exception_handlers(app)

    app.include_router(build_router(service))

    if settings.metrics_enabled:
        @app.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            """Prometheus metrics endpoint."""
            return Response(
                content=get_metrics(),
                media_type=get_metrics_content_type(),
            )

    @app.get("/", include_in_schema=False)
    async def root():
        """Redirect to API documentation."""
        return RedirectResponse(url="/docs")

    return app


app = create_app()


def run_server() -> None:
    """Serve the configured service on its host and port."""
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run_server()

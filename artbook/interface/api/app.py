"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from artbook.config import Settings
from artbook.interface.api.routes import (
    artbooks,
    comments,
    health,
    likes,
    reports,
)
from artbook.util.di.container import create_container, setup_di
from artbook.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes a test container.

    Args:
        container: DI container to use; production container if omitted
    """
    settings = Settings()

    # Logfire must be configured before instrumentation
    instrument_httpx()

    app_instance = FastAPI(
        title="Artbook API",
        description="Backend API for Artbook - illustrated stories with threaded comments and likes",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # The session cookie is sent cross-origin, so origins must be explicit
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(artbooks.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(likes.router)
    app_instance.include_router(reports.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()

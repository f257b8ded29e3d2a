"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portal.config import Settings
from portal.interface.api.errors import register_error_handlers
from portal.interface.api.routes import (
    admin,
    auth,
    blogs,
    comments,
    events,
    gamification,
    health,
    polls,
    resources,
)
from portal.util.di.container import create_container, setup_di
from portal.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes a test container.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Department Portal API",
        description="Backend API for the department portal: accounts, approvals, blogs, polls and learning resources",
        version=settings.version,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Cookies are sent cross-origin from the frontend, so credentials are allowed
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(admin.router)
    app_instance.include_router(blogs.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(polls.router)
    app_instance.include_router(resources.router)
    app_instance.include_router(events.router)
    app_instance.include_router(events.user_router)
    app_instance.include_router(gamification.router)

    return app_instance

"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth.presentation import routes as auth_routes
from iam.presentation import router as iam_router
from infrastructure.database.dependencies import close_database_connections
from infrastructure.exception_handlers import register_exception_handlers
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe
from infrastructure.settings import get_cors_settings, get_oidc_settings, get_settings
from infrastructure.version import __version__


@asynccontextmanager
async def tricore_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Database engine lifecycle (created lazily, disposed on shutdown)
    """
    settings = get_settings()
    configure_logging(debug=settings.debug)

    probe = DefaultStartupProbe()
    if not get_oidc_settings().client_id:
        probe.oidc_client_not_configured()
    probe.application_started(
        version=__version__,
        allowed_origin=get_cors_settings().allowed_origin,
    )

    yield

    await close_database_connections()
    probe.application_stopped()


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware, routes and handlers."""
    cors = get_cors_settings()

    app = FastAPI(
        title=get_settings().app_name,
        description="Identity and group-level authorization backend",
        version=__version__,
        lifespan=tricore_lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[cors.allowed_origin],
        allow_credentials=True,
        allow_methods=cors.allowed_methods,
        allow_headers=["*"],
    )

    app.include_router(auth_routes.router)
    app.include_router(iam_router)
    register_exception_handlers(app)

    @app.get("/health")
    def health():
        """Basic health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()

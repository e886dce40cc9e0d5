"""FastAPI application entry point.

Postboard API - users and posts over in-memory stores.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from postboard.error_handlers import register_error_handlers
from postboard.routes import api_router
from postboard.settings import Settings, get_settings
from postboard.stores.memory import Repositories, create_repositories

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    repositories: Repositories = app.state.repositories
    logger.info(
        "%s started (users=%d, posts=%d)",
        app.title,
        len(repositories.users),
        len(repositories.posts),
    )

    yield

    logger.info("%s shutting down", app.title)


def create_app(
    settings: Settings | None = None,
    repositories: Repositories | None = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Configuration; defaults to the cached environment settings.
        repositories: Stores to serve; defaults to fresh in-memory stores,
            seeded according to `settings.seed_mock_data`.
    """
    settings = settings or get_settings()
    if repositories is None:
        repositories = create_repositories(seed=settings.seed_mock_data)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Users and posts demo API",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.repositories = repositories

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app, debug=settings.debug)

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok"}

    # Include API routes
    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "postboard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )

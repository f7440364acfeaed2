"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from modules.auth.routes import router as auth_router
from modules.images.routes import router as images_router
from modules.notifications.notifier import init_notifier, reset_notifier
from modules.notifications.routes import router as notifications_router
from modules.posts.routes import router as posts_router
from shared.config import get_settings
from shared.tasks import drain_background_tasks

from .errors import register_exception_handlers
from .gql import create_graphql_router
from .routes import health

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The post notifier is created here, before the first request, and torn
    down after the last one.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    init_notifier(settings.notifier_queue_size)
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    await drain_background_tasks()
    reset_notifier()
    logger.info("Shut down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Social blogging feed with REST, GraphQL and real-time updates",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, prefix="/auth", tags=["auth"])
    app.include_router(posts_router, prefix="/feed", tags=["feed"])
    app.include_router(images_router, tags=["images"])
    app.include_router(notifications_router, tags=["realtime"])
    app.include_router(create_graphql_router(), prefix="/graphql", tags=["graphql"])

    return app


# Application instance for uvicorn
app = create_app()

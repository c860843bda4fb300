"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.infrastructure.database import engine, Base
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.core.exceptions import (
    AppError,
    global_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from app.interfaces.deps import get_media_manager

# Import all models so SQLAlchemy knows about them
from app.domain.models.user import User  # noqa: F401
from app.domain.models.post import Post  # noqa: F401

# Import routers
from app.interfaces.api.users import router as users_router
from app.interfaces.api.posts import router as posts_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting blog backend...", env=settings.ENVIRONMENT)

    # Creates missing tables only; existing schemas are left untouched
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    yield

    engine.dispose()
    logger.info("Blog backend stopped")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Blog Backend",
        description="API Backend — authors, posts and media uploads",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Middleware (CORS, Correlation ID, Logging)
    setup_middleware(app)

    # Exception Handling
    app.add_exception_handler(AppError, global_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(users_router)
    app.include_router(posts_router)

    # Uploaded media is public by filename
    app.mount(
        "/uploads",
        StaticFiles(directory=get_media_manager().upload_dir),
        name="uploads",
    )

    @app.get("/")
    def root():
        return {
            "name": "Blog Backend",
            "version": "1.0.0",
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()

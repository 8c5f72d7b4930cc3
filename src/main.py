"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api import auth, bookmarks, profile, settings as settings_routes
from src.api.errors import register_exception_handlers
from src.api.middleware import register_request_logging
from src.config import get_settings
from src.database import check_database_connection

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    if settings.database_startup_check:
        try:
            check_database_connection()
        except Exception:
            logger.exception("Database connectivity check failed")
            raise
    logger.info(f"Holo Bookmarks API started ({settings.environment})")
    yield


app = FastAPI(
    title="Holo Bookmarks API",
    description="Personal bookmark manager with a spatial 3D layout",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)
register_request_logging(app)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register routers
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(settings_routes.router)
app.include_router(bookmarks.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}

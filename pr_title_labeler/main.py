"""Main FastAPI application for the PR Title Labeler."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from pr_title_labeler.api.routes import router as api_router
from pr_title_labeler.config import get_settings
from pr_title_labeler.utils import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> None:
    """Application lifespan events."""
    logger.info("Starting PR Title Labeler API")
    yield
    logger.info("Shutting down PR Title Labeler API")


app = FastAPI(
    title="PR Title Labeler",
    description="Labels GitHub pull requests whose titles follow the type(feature): convention",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    settings = get_settings()
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
    }


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "pr_title_labeler.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )

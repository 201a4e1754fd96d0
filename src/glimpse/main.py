"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from glimpse import __version__
from glimpse.api import api_router
from glimpse.config import get_settings
from glimpse.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging before serving."""
    settings = get_settings()
    setup_logging(settings)
    logger.info("Glimpse ready", env=settings.env, version=__version__)
    yield


app = FastAPI(
    title="Glimpse",
    description="Heuristic sentiment, text statistics and image classification",
    version=__version__,
    lifespan=lifespan,
)

# Infrastructure (no prefix, not versioned)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness check: ok whenever the process is running."""
    return {"status": "ok"}


# Domain API
app.include_router(api_router, prefix="/api/v1")

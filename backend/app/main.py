"""Main FastAPI application."""

import logging
import os
import sys
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Add parent directory to path to import mffl
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from app.api import cache, content, league, nfl, sleeper
from app.config import settings
from app.dependencies import get_league_service

from mffl.errors import (
    ContentValidationError,
    MfflError,
    NotFoundError,
    UpstreamError,
    WeekResolutionError,
)

# Configure logging - can be controlled via LOG_LEVEL environment variable
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, debug=settings.debug, version="1.0.0")

# In development (DEBUG=True), also allow localhost URLs for local testing
allowed_origins = [settings.frontend_url]
if settings.debug:
    allowed_origins.extend(
        [
            "http://localhost:3000",
            "http://localhost:5173",
        ]
    )

allowed_origins = [origin for origin in allowed_origins if origin]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)


def _error_status(exc: MfflError) -> int:
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, (WeekResolutionError, ContentValidationError)):
        return 400
    return 500


@app.exception_handler(MfflError)
async def mffl_error_handler(request: Request, exc: MfflError):
    """Translate domain errors into ``{"detail": message}`` responses."""
    status = _error_status(exc)
    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status, content={"detail": str(exc)})


# Include routers
app.include_router(league.router, prefix="/api/league", tags=["league"])
app.include_router(sleeper.router, prefix="/api/sleeper", tags=["sleeper"])
app.include_router(nfl.router, prefix="/api/nfl", tags=["nfl"])
app.include_router(content.router, prefix="/api", tags=["content"])
app.include_router(cache.router, prefix="/api/cache", tags=["cache"])


@app.on_event("shutdown")
def shutdown():
    """Release the fetch pool and HTTP session."""
    get_league_service().close()


@app.get("/")
async def root():
    """Root endpoint."""
    return {"name": settings.app_name, "version": "1.0.0", "status": "running"}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}

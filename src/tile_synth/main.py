"""FastAPI application entry point."""

import logging
import sys
import traceback

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from tile_synth.config import settings
from tile_synth.routes import parameters_router, tiles_router

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure logging for the service."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


setup_logging()

app = FastAPI(
    title="Tile Synth",
    description="Synthetic vector tiles for exercising tile-based spatial pipelines",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Dense tiles at high feature counts are large JSON payloads
app.add_middleware(GZipMiddleware, minimum_size=1000)

app.include_router(tiles_router)
app.include_router(parameters_router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "tile-synth"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors raised outside request parsing."""
    logger.warning(f"Validation error on {request.method} {request.url}: {exc}")
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Data validation failed",
            "errors": exc.errors(include_url=False, include_context=False),
            "error_type": "ValidationError",
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log unhandled errors with their stack trace and return a JSON 500."""
    logger.error(
        f"Unhandled exception on {request.method} {request.url}: {exc}\n"
        f"{traceback.format_exc()}"
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_type": type(exc).__name__,
        },
    )

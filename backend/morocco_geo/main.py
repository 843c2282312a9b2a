"""Morocco Geo FastAPI Application.

Main entry point for the lookup API server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from morocco_geo import __version__
from morocco_geo.api import get_lookup_service, router
from morocco_geo.config import cors_origins_from_env
from morocco_geo.models import ErrorCode, MoroccoGeoError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: load the dataset once so the first request does not pay for it
    get_lookup_service()
    yield
    # Shutdown
    get_lookup_service().cache.clear()


app = FastAPI(
    title="Morocco Geo API",
    description="Language-aware lookups over Moroccan regions and cities",
    version=__version__,
    lifespan=lifespan,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins_from_env(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handlers
@app.exception_handler(MoroccoGeoError)
async def package_exception_handler(request: Request, exc: MoroccoGeoError):
    """Map invalid-argument errors raised by the lookup layer to 400."""
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": exc.to_app_error().model_dump(mode="json"),
        },
    )


@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors."""
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": {
                "code": ErrorCode.VALIDATION_ERROR.value,
                "message": str(exc),
                "user_message": "Invalid request format. Please check your input.",
            },
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors."""
    logger.exception("Unhandled error")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": {
                "code": ErrorCode.API_ERROR.value,
                "message": str(exc),
                "user_message": "Something went wrong. Please try again.",
            },
        },
    )


# Include API routes
app.include_router(router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}

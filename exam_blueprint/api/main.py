"""FastAPI application setup."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

from exam_blueprint.api.exceptions import CategoriesNotFoundError, ValidationError
from exam_blueprint.api.response import error_response
from exam_blueprint.api.routes import blueprint, exam, health
from exam_blueprint.db.mongo import create_client
from exam_blueprint.services.errors import (
    DegenerateWeightsError,
    EmptyCategorySetError,
    RoundingDriftError,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    app.state.mongo_client = create_client()
    yield
    # Shutdown
    app.state.mongo_client.close()


app = FastAPI(
    title="Exam Blueprint API",
    description="Backend API for previewing exam question distribution across blueprint categories",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for frontend dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handle validation errors."""
    return JSONResponse(
        status_code=400,
        content=error_response("VALIDATION_ERROR", exc.message),
    )


@app.exception_handler(CategoriesNotFoundError)
@app.exception_handler(EmptyCategorySetError)
async def categories_not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle an empty category store."""
    return JSONResponse(
        status_code=404,
        content=error_response("CATEGORIES_NOT_FOUND", "No active blueprint categories found"),
    )


@app.exception_handler(DegenerateWeightsError)
async def degenerate_weights_handler(request: Request, exc: DegenerateWeightsError) -> JSONResponse:
    """Handle categories whose weights sum to zero."""
    logger.error(f"Blueprint misconfigured on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content=error_response(
            "CONFIGURATION_ERROR",
            "Blueprint category weights sum to zero. Check the category configuration.",
        ),
    )


@app.exception_handler(RoundingDriftError)
async def rounding_drift_handler(request: Request, exc: RoundingDriftError) -> JSONResponse:
    """Handle allocation post-condition failures without leaking details."""
    logger.error(f"Error in {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content=error_response("INTERNAL_ERROR", "Internal server error"),
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle anything else as an opaque server error."""
    logger.exception(f"Error in {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content=error_response("INTERNAL_ERROR", "Internal server error"),
    )


@app.exception_handler(ServerSelectionTimeoutError)
async def mongo_timeout_handler(request: Request, exc: ServerSelectionTimeoutError) -> JSONResponse:
    """Handle MongoDB connection timeout."""
    return JSONResponse(
        status_code=503,
        content=error_response("DATABASE_UNAVAILABLE", "Database is not available. Please try again later."),
    )


@app.exception_handler(ConnectionFailure)
async def mongo_connection_handler(request: Request, exc: ConnectionFailure) -> JSONResponse:
    """Handle MongoDB connection failure."""
    return JSONResponse(
        status_code=503,
        content=error_response("DATABASE_UNAVAILABLE", "Database connection failed. Please try again later."),
    )


# Register routes
app.include_router(health.router)
app.include_router(exam.router, prefix="/api")
app.include_router(blueprint.router, prefix="/api")

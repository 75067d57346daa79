"""
Main application entry point.

This module initializes and configures the FastAPI application.
It handles startup/shutdown events and wires everything together.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from config.settings import settings
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.presentation.dependencies import get_user_adapter
from src.presentation.routes import router

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Startup: Build the user adapter (and its empty store)
    - Shutdown: Release every stored record

    Decision: Using the lifespan context manager instead of deprecated
    @app.on_event decorators.
    """
    # Startup
    logger.info("Starting User Directory API...")

    # Resolve the adapter the routes receive, honoring dependency overrides
    adapter_provider = app.dependency_overrides.get(get_user_adapter, get_user_adapter)
    adapter = adapter_provider()
    logger.info("In-memory user store initialized")

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down User Directory API...")
    adapter.database.clear()
    logger.info("Application shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="User Directory API",
    description="""
    Minimal user directory built with Ports and Adapters.

    ## Features
    - Create a user from id, username and password
    - Look up a user by id
    - Hexagonal Architecture: controller -> service -> port <- adapter

    ## Technical Stack
    - FastAPI for REST API
    - Generic in-memory record store for persistence
    """,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Custom exception handler for Pydantic validation errors
# Decision: Return 400 Bad Request instead of 422 Unprocessable Entity
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors and return 400 Bad Request."""
    errors = exc.errors()
    error_messages = [f"{err['loc'][-1]}: {err['msg']}" for err in errors]

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": {
                "error": "ValidationError",
                "message": "Request validation failed",
                "errors": error_messages,
            }
        },
    )


# Include routes
app.include_router(router)


# Root endpoint
@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    """Root endpoint with API information."""
    return {
        "service": "User Directory API",
        "version": settings.app_version,
        "status": "running",
        "docs": "/docs",
        "health": "/api/v1/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )

"""User Registration API - FastAPI Application

Registers users with validated, unique credentials and authenticates them by
username or email.
"""

import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.infrastructure.database.connection import init_models

# Import routers
from app.presentation.api.auth import router as auth_router
from app.presentation.api.users import router as users_router
from app.presentation.schemas.common_schemas import ErrorResponse, HealthCheckResponse

logger = logging.getLogger(__name__)


async def malformed_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Unparseable or mistyped request bodies are unexpected failures"""
    logger.error(f"Malformed request body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(message="Malformed request body").model_dump(),
    )


def create_application() -> FastAPI:
    """Create and configure FastAPI application"""

    # Configure logging
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(),  # Console output
        ],
    )

    # Set specific loggers
    logging.getLogger("app").setLevel(settings.log_level.upper())
    logging.getLogger("uvicorn").setLevel(logging.INFO)

    app = FastAPI(
        title=settings.app_name,
        description="User registration and login with validated, unique credentials",
        version=settings.version,
        debug=settings.debug,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, malformed_body_handler)  # type: ignore

    # Include routers
    app.include_router(auth_router, tags=["Authentication"])
    app.include_router(users_router, tags=["Users"])

    return app


# Create FastAPI app
app = create_application()


@app.on_event("startup")
async def startup_event() -> None:
    """Application startup event"""
    await init_models()


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {
        "message": "Welcome to the User Registration API!",
        "description": "Register with POST /register and sign in with POST /login",
        "version": settings.version,
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint"""
    from datetime import datetime

    return HealthCheckResponse(
        app=settings.app_name,
        version=settings.version,
        timestamp=datetime.utcnow().isoformat() + "Z",
    )


def start() -> None:
    """Start the server"""
    uvicorn.run(
        "app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=settings.debug,
        log_level="info",
    )

"""
FastAPI application factory.

Integrates:
  - Transcription and feedback proxy routes
  - Health checks
  - CORS and request-logging middleware
  - 400 {error} bodies for malformed requests
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from infra import InfraConfig, bootstrap_infrastructure

from .routes import request_validation_error_handler, router

logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "Interview Practice API is running"


def create_app(config: Optional[InfraConfig] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        config: Optional custom configuration (environment when None)
    """
    infra = bootstrap_infrastructure(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan: startup and shutdown handlers.
        """
        logger.info("=" * 60)
        logger.info("Interview Practice API starting up...")
        logger.info(f"Environment: {infra.config.environment}")
        logger.info(f"Backends: {infra!r}")
        if not infra.config.credentials_configured:
            logger.warning("OPENAI_API_KEY is not set; serving simulated responses")
        logger.info("=" * 60)

        yield

        logger.info("Interview Practice API shutting down...")

    app = FastAPI(
        title="Interview Practice API",
        description="Transcription and feedback proxy for interview practice",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.infra = infra

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(infra.config.cors_origins),
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests."""
        logger.debug(f"{request.method} {request.url.path}")
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Request error: {str(e)}", exc_info=True)
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal server error"},
            )

    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.include_router(router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Plain-text health string."""
        return HEALTH_MESSAGE

    @app.get("/health/live")
    async def health_live():
        """Liveness probe."""
        return {"status": "alive"}

    @app.get("/health/ready")
    async def health_ready():
        """Readiness probe. Missing credentials still count as ready (simulated mode)."""
        return {
            "status": "ready",
            "credentials_configured": infra.config.credentials_configured,
        }

    return app

"""
FastAPI Application Setup.

Application factory for the Student Registry REST API.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from student_registry import __version__
from student_registry.api.middleware.logging import RequestLoggingMiddleware
from student_registry.api.routes import health, owner, students
from student_registry.api.schemas.exceptions import error_body, status_code_for
from student_registry.config import RegistryConfig
from student_registry.core.exceptions import StudentRegistryError
from student_registry.host import configure_logging, open_registry
from student_registry.registry.service import StudentRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown of the registry host."""
    logger.info(f"Student Registry API v{__version__} starting up")
    if not app.state.registry.is_initialized:
        logger.warning("Registry has no owner yet; mutating calls will fail until initialized")
    yield
    logger.info("Student Registry API shutting down")


def create_app(
    registry: StudentRegistry | None = None,
    config: RegistryConfig | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        registry: Registry to serve (default: file-backed registry from config)
        config: Host configuration (default: loaded from environment)

    Returns:
        Configured FastAPI application instance
    """
    config = config or RegistryConfig.from_env()
    configure_logging(config)

    app = FastAPI(
        title="Student Registry API",
        description="Owner-gated registry of student records",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.registry = registry if registry is not None else open_registry(config)

    app.add_middleware(RequestLoggingMiddleware, caller_header=config.caller_header)

    app.include_router(health.router, prefix="/health", tags=["Health"])
    app.include_router(owner.router, prefix="/api/v1/owner", tags=["Owner"])
    app.include_router(students.router, prefix="/api/v1/students", tags=["Students"])

    @app.exception_handler(StudentRegistryError)
    async def registry_exception_handler(
        request: Request, exc: StudentRegistryError
    ) -> JSONResponse:
        """Translate registry errors into their HTTP status and error envelope."""
        status_code = status_code_for(exc)
        if status_code >= 500:
            logger.error(f"Registry failure on {request.url.path}: {exc}")
        return JSONResponse(status_code=status_code, content=error_body(exc))

    @app.get("/", tags=["Root"])
    async def root() -> dict[str, object]:
        """Root endpoint with API information."""
        return {
            "name": "Student Registry API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app

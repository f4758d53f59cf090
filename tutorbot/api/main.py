"""
FastAPI application with assembled routers.

Initializes the FastAPI app with all API routers, observability middleware
and the TutorBotException handler, and configures the uvicorn server.

Dependencies: fastapi, tutorbot.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tutorbot.api.deps.dependencies import get_service_cache
from tutorbot.boundary.db import create_tables
from tutorbot.configs import get_settings
from tutorbot.core.exceptions import TutorBotException
from tutorbot.models.common import ErrorResponse
from tutorbot.observability import configure_logging
from tutorbot.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    admin_router,
    chat_router,
    conversations_router,
    documents_router,
    health_router,
    modules_router,
    settings_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and creates missing tables on startup; drops cached
    clients on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    # Startup
    await create_tables()
    logger.info("Database tables ready", extra={"environment": settings.environment})

    yield

    # Shutdown
    get_service_cache().clear()
    logger.info("Service cache cleared")


async def tutorbot_exception_handler(request: Request, exc: TutorBotException) -> JSONResponse:
    """Render domain errors as ErrorResponse with the exception's status."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"{request.method} {request.url.path} - {type(exc).__name__}",
        extra={"status_code": exc.status_code, "error": exc.message},
    )
    body = ErrorResponse(error=exc.message, details=exc.details or None)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request body/parameter validation failures as 400 ErrorResponse."""
    errors = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": str(err.get("msg", ""))}
        for err in exc.errors()
    ]
    body = ErrorResponse(error="Invalid request", details={"errors": errors})
    return JSONResponse(status_code=400, content=body.model_dump())


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    app = FastAPI(
        title="TutorBot API",
        description="Socratic teaching-assistant chat backend with course materials",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(TutorBotException, tutorbot_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")
    app.include_router(modules_router, prefix="/api/v1")
    app.include_router(documents_router, prefix="/api/v1")
    app.include_router(conversations_router, prefix="/api/v1")
    app.include_router(settings_router, prefix="/api/v1")
    app.include_router(admin_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "tutorbot.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().debug,
    )

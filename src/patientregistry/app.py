"""
FastAPI application factory and main app configuration.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.routers import health, patients
from .core.config import Settings, get_settings
from .core.structured_logger import configure_logging
from .domain.enums.error_kind import ErrorKind
from .domain.errors import DomainError

logger = logging.getLogger("patientregistry")

# HTTP status for each domain error kind; unknown kinds fall back to 400.
ERROR_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ALREADY_EXISTS: 409,
    ErrorKind.PERSISTENCE: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version} ({settings.app_env})")
    yield
    logger.info(f"Shutting down {settings.app_name}")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.logging)

    app = FastAPI(
        title=settings.app_name,
        description="In-memory patient registry with medical records",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    app.include_router(health.router)
    app.include_router(patients.router)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        status_code = ERROR_STATUS_CODES.get(exc.kind, 400)
        log = logger.error if status_code >= 500 else logger.warning
        log(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=status_code,
            content={
                "error": exc.message,
                "kind": exc.kind.value,
                "code": exc.error_code,
                "details": exc.details,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        error_messages = []
        for error in exc.errors():
            loc = " -> ".join(str(x) for x in error.get("loc", []))
            error_messages.append(f"{loc}: {error.get('msg', 'Validation error')}")

        logger.warning(f"Invalid request on {request.method} {request.url.path}: {error_messages}")
        return JSONResponse(
            status_code=400,
            content={
                "error": f"Input validation failed: {'; '.join(error_messages)}",
                "kind": ErrorKind.VALIDATION.value,
                "code": "INVALID_INPUT",
                "details": {"path": request.url.path},
            },
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={
                "error": "An unexpected error has occurred.",
                "kind": "internal",
                "code": "INTERNAL_ERROR",
                "details": {},
            },
        )

    @app.get("/", tags=["health"])
    async def root():
        """Root endpoint with API information."""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "environment": settings.app_env,
            "status": "running",
            "docs": "/docs",
            "endpoints": {
                "health": "GET /health",
                "create_patient": "POST /patients/",
                "list_patients": "GET /patients/",
                "get_patient": "GET /patients/{patient_id}",
                "update_patient": "PUT /patients/{patient_id}",
                "delete_patient": "DELETE /patients/{patient_id}",
                "search_by_name": "GET /patients/search/name/{name}",
                "search_by_blood_type": "GET /patients/search/blood-type/{blood_type}",
                "medical_record": "GET /patients/{patient_id}/medical-record",
                "active_treatments": "GET /patients/{patient_id}/medical-record/active-treatments",
            },
        }

    return app


# Create the app instance
app = create_app()

"""
FastAPI application initialization
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from api.routes import health, auth, schema, data, dashboard, tasks, users
from api.middleware import RequestContextMiddleware
from core.config import settings
from core.database import init_db
from core.exceptions import (
    DashboardException,
    AuthenticationError,
    AccessDeniedError,
    ResourceNotFoundError,
    ConflictError,
)
from core.logging import setup_logging
from schemas.api import ErrorResponse
import logging

setup_logging()

logger = logging.getLogger(__name__)

# Status code per exception family; StorageError is left to surface as a 500
ERROR_STATUS_CODES = {
    AuthenticationError: 401,
    AccessDeniedError: 403,
    ResourceNotFoundError: 404,
    ConflictError: 409,
}

# Create FastAPI app
app = FastAPI(
    title="Digimark Marketing Dashboard API",
    description="Marketing metrics, task board and account management for a small marketing team",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(RequestContextMiddleware)


# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(schema.router)
app.include_router(data.router)
app.include_router(dashboard.router)
app.include_router(tasks.router)
app.include_router(users.router)


def _error_response(status_code: int, error: str, detail: str) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def _domain_error_handler(status_code: int):
    async def handler(request: Request, exc: DashboardException) -> JSONResponse:
        logger.warning(f"{request.method} {request.url.path} failed: {exc}")
        return _error_response(status_code, type(exc).__name__, exc.message)

    return handler


for exc_class, status_code in ERROR_STATUS_CODES.items():
    app.add_exception_handler(exc_class, _domain_error_handler(status_code))


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Invalid values built outside request-body parsing, e.g. query filters"""
    return _error_response(422, "ValidationError", str(exc))


@app.on_event("startup")
def startup_event():
    """Application startup event"""
    logger.info("Starting Digimark Marketing Dashboard API")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    if settings.AUTO_CREATE_TABLES:
        init_db()


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "Digimark Marketing Dashboard API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
        "endpoints": {
            "auth": "/auth",
            "schema": "/schema/channels",
            "data": "/data",
            "dashboard": "/dashboard",
            "tasks": "/tasks",
            "users": "/users"
        }
    }

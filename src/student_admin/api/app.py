"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from student_admin import __version__
from student_admin.api.dependencies import require_admin
from student_admin.api.models import ErrorResponse
from student_admin.api.routes import auth, students
from student_admin.auth import DuplicateEmailError, InvalidCredentialsError, InvalidTokenError
from student_admin.config import Settings
from student_admin.container import Services, build_services
from student_admin.records import RecordStoreError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    owned = app.state.services is None
    if owned:
        app.state.services = build_services(app.state.settings)
    logger.info("Student Admin API started (db=%s)", app.state.settings.db_path)

    yield
    # Shutdown
    if owned:
        app.state.services.close()
        app.state.services = None


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain errors to HTTP responses."""

    @app.exception_handler(InvalidCredentialsError)
    async def invalid_credentials_handler(
        _request: Request, _exc: InvalidCredentialsError
    ) -> JSONResponse:
        return _error(status.HTTP_401_UNAUTHORIZED, "Invalid email or password")

    @app.exception_handler(InvalidTokenError)
    async def invalid_token_handler(_request: Request, _exc: InvalidTokenError) -> JSONResponse:
        return _error(
            status.HTTP_401_UNAUTHORIZED,
            "Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(DuplicateEmailError)
    async def duplicate_email_handler(_request: Request, _exc: DuplicateEmailError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, "Email already exists")

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return _error(status.HTTP_400_BAD_REQUEST, f"Invalid request: {message}")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(RecordStoreError)
    async def record_store_error_handler(_request: Request, _exc: RecordStoreError) -> JSONResponse:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "An error occurred")

    # Served by ServerErrorMiddleware, which wraps CORSMiddleware: these 500s
    # carry no CORS headers and the exception is re-raised after responding.
    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "An error occurred")


def create_app(settings: Settings | None = None, services: Services | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. Defaults to Settings.from_env().
        services: Pre-built collaborators. When given, the app uses them as-is and
            leaves closing them to the caller; otherwise they are built from
            settings on startup and closed on shutdown.
    """
    if settings is None:
        settings = services.settings if services is not None else Settings.from_env()

    app = FastAPI(
        title="Student Admin API",
        description="Administrator authentication and student record management",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.settings = settings
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(
        students.router,
        dependencies=[Depends(require_admin)] if settings.require_auth else [],
    )

    return app

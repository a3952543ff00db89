"""
Application errors and the centralized FastAPI handlers that render them.

Route handlers and services raise AppError subclasses; the handlers
registered by register_exception_handlers() turn them into
{"error": "<message>"} JSON bodies with the error's status code.
"""

from typing import Iterable, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.utils.logger import get_logger

logger = get_logger(__name__)

MISSING_FIELDS_MESSAGE = "Faltan campos requeridos"
INVALID_FIELDS_MESSAGE = "Campos inválidos"
INVALID_JSON_MESSAGE = "JSON inválido"
INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


class AppError(Exception):
    """
    Base application error.

    - message: human-readable text, safe to show to clients
    - status_code: HTTP status that accompanies the error
    - fields: optional field names related to the error
    """

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, *, status_code: Optional[int] = None,
                 fields: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.fields = list(fields) if fields else None

    def to_payload(self) -> dict:
        payload = {"error": self.message}
        if self.fields:
            payload["campos"] = self.fields
        return payload


class ValidationError(AppError):
    """Missing or malformed input (body fields or path id)."""
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AppError):
    """An equivalent active record already exists."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class UnexpectedError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE, **kwargs):
        super().__init__(message, **kwargs)


def _field_name(loc) -> Optional[str]:
    # loc looks like ("body", "nombre_rol"); a bare ("body",) means no JSON at all
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) if parts else None


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} → {exc.status_code}: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} → {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        # loc holds the parse offset here, not a field name
        error = ValidationError(INVALID_JSON_MESSAGE)
    else:
        fields = []
        for err in errors:
            name = _field_name(err.get("loc", ()))
            if name and name not in fields:
                fields.append(name)
        missing = any(err.get("type") == "missing" for err in errors)
        error = ValidationError(MISSING_FIELDS_MESSAGE if missing else INVALID_FIELDS_MESSAGE, fields=fields)
    logger.info(f"{request.method} {request.url.path} → 400: {error.message} fields={error.fields}")
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Database error on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=UnexpectedError().to_payload(),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=UnexpectedError().to_payload(),
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

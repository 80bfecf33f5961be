"""
Global error handling.

Domain exceptions carry a code; the code decides the HTTP status. Every
error body has the same shape: {"error": message, "code": code, ...}.
"""

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from comptoir.config.settings import get_settings
from comptoir.domain.exceptions import ComptoirException, StorageError
from comptoir.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

STATUS_CODE_MAP = {
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "INSUFFICIENT_COLLATERAL": status.HTTP_400_BAD_REQUEST,
    "AUTHENTICATION_ERROR": status.HTTP_401_UNAUTHORIZED,
    "AUTHENTICATION_REQUIRED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_403_FORBIDDEN,
    "STORAGE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _storage_error_response(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Storage error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    message = str(exc) if get_settings().is_development else INTERNAL_ERROR_MESSAGE
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": message, "code": "STORAGE_ERROR"},
    )


async def comptoir_exception_handler(
    request: Request, exc: ComptoirException
) -> JSONResponse:
    """
    Handle Comptoir domain exceptions.

    Converts domain exceptions to appropriate HTTP responses.
    """
    if isinstance(exc, StorageError):
        return _storage_error_response(request, exc)

    status_code = STATUS_CODE_MAP.get(
        exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    logger.warning(
        f"{request.method} {request.url.path} -> {status_code} "
        f"{exc.code}: {exc.message}"
    )

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code,
        content={"error": exc.message, "code": exc.code, **exc.details()},
        headers=headers,
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Missing or mistyped request fields are client errors (400)."""
    logger.warning(f"{request.method} {request.url.path} -> 400 invalid request")
    # Rejected input is not echoed back; it may be NaN, which JSON cannot encode
    details = [
        {key: value for key, value in error.items() if key != "input"}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Missing or invalid fields",
            "code": "VALIDATION_ERROR",
            "details": jsonable_encoder(details),
        },
    )


async def sqlalchemy_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Driver errors that escaped a repository."""
    return _storage_error_response(request, exc)

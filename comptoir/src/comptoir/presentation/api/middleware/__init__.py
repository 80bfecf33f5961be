"""API middleware and exception handlers."""

from comptoir.presentation.api.middleware.error_handler import (
    comptoir_exception_handler,
    request_validation_exception_handler,
    sqlalchemy_exception_handler,
)

__all__ = [
    "comptoir_exception_handler",
    "request_validation_exception_handler",
    "sqlalchemy_exception_handler",
]

"""
Base domain exceptions.
"""


class ComptoirException(Exception):
    """Base exception for all Comptoir domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def details(self) -> dict:
        """Extra fields merged into the JSON error body."""
        return {}


class EntityNotFoundError(ComptoirException):
    """Raised when entity is not found in repository."""

    def __init__(self, entity_type: str, entity_id: object = None):
        if entity_id is None:
            message = f"{entity_type} not found"
        else:
            message = f"{entity_type} with ID {entity_id} not found"
        super().__init__(message, code="ENTITY_NOT_FOUND")


class ValidationError(ComptoirException):
    """Raised when request data or a business rule check fails."""

    def __init__(self, field: str, reason: str):
        self.field = field
        message = f"Validation failed for {field}: {reason}"
        super().__init__(message, code="VALIDATION_ERROR")


class StorageError(ComptoirException):
    """Raised when the underlying store fails."""

    def __init__(self, message: str = "Database error"):
        super().__init__(message, code="STORAGE_ERROR")

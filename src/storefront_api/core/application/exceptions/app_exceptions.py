"""Application exception hierarchy.

Every use case and adapter raises from this tree. The HTTP layer maps each
class to its status code and renders the response envelope, so handlers
never build error responses by hand.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application-layer errors."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: str | None = None,
        errors: list[str] | None = None,
        *,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        self.errors: list[str] = list(errors) if errors else [self.message]
        self.context: dict[str, Any] = context or {}


class ValidationError(ApplicationError):
    status_code = 400
    default_message = "Validation failed"


class AuthenticationError(ApplicationError):
    status_code = 401
    default_message = "Access denied"


class AuthorizationError(ApplicationError):
    status_code = 403
    default_message = "Access forbidden"


class NotFoundError(ApplicationError):
    status_code = 404
    default_message = "Resource not found"


class ConflictError(ApplicationError):
    status_code = 409
    default_message = "Resource conflict"


class DuplicateKeyError(ConflictError):
    """Raised by repositories when a unique index rejects a write."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Duplicate value for {field}", [f"The {field} is already in use"])
        self.field = field


class InsufficientStockError(ApplicationError):
    status_code = 400
    default_message = "Insufficient stock"


class StockUpdateError(ApplicationError):
    status_code = 400
    default_message = "Stock update failed"


class UploadError(ApplicationError):
    status_code = 400
    default_message = "File upload failed"


class ImageProcessingError(ApplicationError):
    status_code = 400
    default_message = "Image processing failed"


class RateLimitExceededError(ApplicationError):
    status_code = 429
    default_message = "Too many requests"

    def __init__(
        self,
        message: str | None = None,
        errors: list[str] | None = None,
        *,
        limit: int = 0,
        reset_after: int = 0,
    ) -> None:
        super().__init__(message, errors)
        self.limit = limit
        self.reset_after = reset_after


class StorageError(ApplicationError):
    """Persistence or media backend failed in a way the caller cannot fix."""

    status_code = 500
    default_message = "Storage operation failed"

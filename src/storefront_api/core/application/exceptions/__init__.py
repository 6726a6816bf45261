from storefront_api.core.application.exceptions.app_exceptions import (
    ApplicationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DuplicateKeyError,
    ImageProcessingError,
    InsufficientStockError,
    NotFoundError,
    RateLimitExceededError,
    StockUpdateError,
    StorageError,
    UploadError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DuplicateKeyError",
    "ImageProcessingError",
    "InsufficientStockError",
    "NotFoundError",
    "RateLimitExceededError",
    "StockUpdateError",
    "StorageError",
    "UploadError",
    "ValidationError",
]

from storefront_api.core.application.validation.input_validators import (
    normalize_product,
    parse_order_items,
    validate_email,
    validate_password,
    validate_product,
    validate_username,
)
from storefront_api.core.application.validation.upload_validator import (
    ALLOWED_EXTENSIONS,
    ALLOWED_MIME_TYPES,
    UploadPolicy,
    filename_problem,
)

__all__ = [
    "ALLOWED_EXTENSIONS",
    "ALLOWED_MIME_TYPES",
    "UploadPolicy",
    "filename_problem",
    "normalize_product",
    "parse_order_items",
    "validate_email",
    "validate_password",
    "validate_product",
    "validate_username",
]

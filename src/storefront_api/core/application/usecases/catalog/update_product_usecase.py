from typing import Any

from storefront_api.core.application.exceptions import NotFoundError, ValidationError
from storefront_api.core.application.ports import ProductRepositoryPort
from storefront_api.core.application.validation import normalize_product, validate_product
from storefront_api.core.domain.catalog import Product
from storefront_api.core.domain.shared import utc_now


class UpdateProductUseCase:
    """Partial update: only the fields present in ``changes`` are validated and written."""

    def __init__(self, products: ProductRepositoryPort):
        self.products = products

    def execute(self, product_id: str, changes: dict[str, Any]) -> Product:
        if self.products.find_by_id(product_id) is None:
            raise NotFoundError("Product not found", ["Product does not exist"])

        errors = validate_product(changes, partial=True)
        if errors:
            raise ValidationError("Product update failed", errors)

        fields = normalize_product(changes)
        if not fields:
            raise ValidationError("Product update failed", ["No product fields provided"])
        fields["updated_at"] = utc_now()

        updated = self.products.update(product_id, fields)
        if updated is None:
            raise NotFoundError("Product not found", ["Product does not exist"])
        return updated

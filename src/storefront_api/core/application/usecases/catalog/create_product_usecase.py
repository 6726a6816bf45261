from typing import Any

from storefront_api.core.application.exceptions import ValidationError
from storefront_api.core.application.ports import ProductRepositoryPort
from storefront_api.core.application.validation import normalize_product, validate_product
from storefront_api.core.domain.catalog import Product
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


class CreateProductUseCase:
    def __init__(self, products: ProductRepositoryPort):
        self.products = products

    def execute(self, data: dict[str, Any], user_id: str | None) -> Product:
        errors = validate_product(data)
        if errors:
            raise ValidationError("Product creation failed", errors)

        product = Product(**normalize_product(data), user_id=user_id)
        created = self.products.add(product)
        logger.info(f"Product {created.id} created by {user_id}")
        return created

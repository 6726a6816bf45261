from storefront_api.core.application.exceptions import NotFoundError
from storefront_api.core.application.ports import ProductRepositoryPort
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


class DeleteProductUseCase:
    def __init__(self, products: ProductRepositoryPort):
        self.products = products

    def execute(self, product_id: str) -> None:
        if not self.products.delete(product_id):
            raise NotFoundError("Product not found", ["Product does not exist"])
        # stored images stay on disk until the storage cleanup runs
        logger.info(f"Product {product_id} deleted")

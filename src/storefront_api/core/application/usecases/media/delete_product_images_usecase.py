from datetime import datetime

from storefront_api.core.application.exceptions import NotFoundError, StorageError
from storefront_api.core.application.ports import ImageStoragePort, ProductRepositoryPort
from storefront_api.core.domain.media import images_from_document
from storefront_api.core.domain.shared import utc_now
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


class DeleteProductImagesUseCase:
    """Clears the product's image data first, then removes the stored assets.

    An asset that cannot be removed is logged and left for the orphan cleanup.
    """

    def __init__(self, products: ProductRepositoryPort, storage: ImageStoragePort):
        self.products = products
        self.storage = storage

    def execute(self, product_id: str) -> datetime:
        product = self.products.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found", ["Product does not exist"])

        images = images_from_document(product_id, product.images)
        deleted_at = utc_now()
        if self.products.update(product_id, {"images": None, "updated_at": deleted_at}) is None:
            raise StorageError(
                "Image deletion failed", ["Failed to update product image data"]
            )

        for image in images:
            try:
                self.storage.remove(image)
            except StorageError as e:
                logger.warning(f"Could not remove image asset of product {product_id}: {e}")
        return deleted_at

from dataclasses import dataclass, field

from storefront_api.core.application.exceptions import (
    ApplicationError,
    ImageProcessingError,
    NotFoundError,
    StorageError,
    UploadError,
)
from storefront_api.core.application.ports import ImageStoragePort, ProductRepositoryPort
from storefront_api.core.application.validation import UploadPolicy
from storefront_api.core.domain.media import (
    ImageUpload,
    StoredImage,
    images_document,
    images_from_document,
)
from storefront_api.core.domain.shared import utc_now
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


@dataclass
class UploadOutcome:
    product_id: str
    images: list[StoredImage]
    total_files: int
    errors: list[str] = field(default_factory=list)


class UploadProductImagesUseCase:
    """Stores new images for a product, replacing the ones it had.

    In ``single`` mode the first failure is raised as is. Otherwise failures
    are collected per file and the call only fails when no image survived.
    Assets stored during a call are removed again when the product cannot be
    updated, and the replaced assets are removed once the update succeeded.
    """

    def __init__(
        self,
        products: ProductRepositoryPort,
        storage: ImageStoragePort,
        policy: UploadPolicy,
    ):
        self.products = products
        self.storage = storage
        self.policy = policy

    def execute(
        self, product_id: str, uploads: list[ImageUpload], *, single: bool = False
    ) -> UploadOutcome:
        if not uploads:
            if single:
                raise UploadError("No file uploaded", ["Please select an image file to upload"])
            raise UploadError("No images uploaded", ["At least one image file is required"])
        self.policy.check(uploads)

        product = self.products.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found", ["Product does not exist"])

        stored: list[StoredImage] = []
        errors: list[str] = []
        for index, upload in enumerate(uploads, start=1):
            try:
                stored.append(self.storage.store(upload, product_id))
            except ApplicationError as e:
                if single:
                    raise
                errors.append(f"Image {index} ({upload.filename}): {e.errors[0]}")

        if not stored:
            raise ImageProcessingError("Image processing failed", errors)

        previous = images_from_document(product_id, product.images)
        try:
            updated = self.products.update(
                product_id, {"images": images_document(stored), "updated_at": utc_now()}
            )
        except Exception:
            logger.error(f"Image metadata update failed for product {product_id}")
            self._discard_all(stored)
            raise
        if updated is None:
            self._discard_all(stored)
            raise StorageError(
                "Image upload failed", ["Failed to update product with image data"]
            )

        self._discard_all(previous)

        logger.info(f"Stored {len(stored)} of {len(uploads)} images for product {product_id}")
        return UploadOutcome(
            product_id=product_id, images=stored, total_files=len(uploads), errors=errors
        )

    def _discard_all(self, images: list[StoredImage]) -> None:
        for image in images:
            try:
                self.storage.remove(image)
            except StorageError as e:
                logger.warning(
                    f"Could not remove image asset of product {image.product_id}: {e}"
                )

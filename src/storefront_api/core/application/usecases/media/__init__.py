from storefront_api.core.application.usecases.media.delete_product_images_usecase import DeleteProductImagesUseCase
from storefront_api.core.application.usecases.media.storage_maintenance_usecase import StorageMaintenanceUseCase
from storefront_api.core.application.usecases.media.upload_product_images_usecase import (
    UploadOutcome,
    UploadProductImagesUseCase,
)

__all__ = [
    "DeleteProductImagesUseCase",
    "StorageMaintenanceUseCase",
    "UploadOutcome",
    "UploadProductImagesUseCase",
]

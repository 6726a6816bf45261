from storefront_api.core.domain.media.image_upload import ImageUpload
from storefront_api.core.domain.media.image_variant import IMAGE_VARIANTS, ImageVariantSpec, VariantName
from storefront_api.core.domain.media.stored_image import (
    StorageProvider,
    StoredImage,
    images_document,
    images_from_document,
)

__all__ = [
    "IMAGE_VARIANTS",
    "ImageUpload",
    "ImageVariantSpec",
    "StorageProvider",
    "StoredImage",
    "VariantName",
    "images_document",
    "images_from_document",
]

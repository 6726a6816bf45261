from storefront_api.infrastructure.media.cloudinary.cloudinary_client import CloudinaryClient
from storefront_api.infrastructure.media.cloudinary.cloudinary_image_storage import CloudinaryImageStorage

__all__ = ["CloudinaryClient", "CloudinaryImageStorage"]

from storefront_api.infrastructure.media.local_image_storage import LocalImageStorage
from storefront_api.infrastructure.media.pillow_image_processor import PillowImageProcessor
from storefront_api.infrastructure.media.size_formatter import format_size

__all__ = ["LocalImageStorage", "PillowImageProcessor", "format_size"]

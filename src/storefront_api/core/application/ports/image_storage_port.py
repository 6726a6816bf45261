from abc import ABC, abstractmethod
from typing import Any

from storefront_api.core.domain.media import ImageUpload, StorageProvider, StoredImage


class ImageStoragePort(ABC):
    @property
    @abstractmethod
    def provider(self) -> StorageProvider:
        pass

    @abstractmethod
    def store(self, upload: ImageUpload, product_id: str) -> StoredImage:
        """Processes and persists one upload. Raises ImageProcessingError on bad input."""
        pass

    @abstractmethod
    def remove(self, image: StoredImage) -> None:
        pass

    @abstractmethod
    def storage_stats(self) -> dict[str, Any]:
        pass

    @abstractmethod
    def cleanup_orphans(self, active_product_ids: set[str]) -> int:
        """Deletes assets of products that no longer exist. Returns the number removed."""
        pass

from typing import Any

from storefront_api.core.application.ports import ImageStoragePort, ProductRepositoryPort
from storefront_api.core.domain.shared import utc_now
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


class StorageMaintenanceUseCase:
    def __init__(self, products: ProductRepositoryPort, storage: ImageStoragePort):
        self.products = products
        self.storage = storage

    def stats(self) -> dict[str, Any]:
        return self.storage.storage_stats()

    def cleanup(self) -> dict[str, Any]:
        active_ids = set(self.products.list_ids())
        removed = self.storage.cleanup_orphans(active_ids)
        logger.info(f"Storage cleanup removed {removed} orphaned files")
        return {
            "activeProducts": len(active_ids),
            "removedFiles": removed,
            "storageStats": self.storage.storage_stats(),
            "cleanupAt": utc_now().isoformat(),
        }

from storefront_api.infrastructure.configuration.database_settings import StorageBackend
from storefront_api.infrastructure.configuration.main_settings import Settings, get_settings

__all__ = ["Settings", "StorageBackend", "get_settings"]

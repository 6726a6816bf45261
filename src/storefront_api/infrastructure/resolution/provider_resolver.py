from dataclasses import dataclass

from storefront_api.core.application.ports import (
    ImageStoragePort,
    OrderRepositoryPort,
    ProductRepositoryPort,
    UnitOfWorkPort,
    UserRepositoryPort,
)
from storefront_api.infrastructure.configuration.database_settings import StorageBackend
from storefront_api.infrastructure.configuration.main_settings import Settings
from storefront_api.infrastructure.media.cloudinary import CloudinaryClient, CloudinaryImageStorage
from storefront_api.infrastructure.media.local_image_storage import LocalImageStorage
from storefront_api.infrastructure.persistence.memory import (
    MemoryOrderRepository,
    MemoryProductRepository,
    MemoryStore,
    MemoryUnitOfWork,
    MemoryUserRepository,
)
from storefront_api.infrastructure.persistence.mongo import (
    MongoConnection,
    MongoOrderRepository,
    MongoProductRepository,
    MongoUnitOfWork,
    MongoUserRepository,
)


@dataclass
class Persistence:
    users: UserRepositoryPort
    products: ProductRepositoryPort
    orders: OrderRepositoryPort
    unit_of_work: UnitOfWorkPort
    connection: MongoConnection | None = None

    def connect(self) -> None:
        if self.connection is not None:
            self.connection.connect()

    def close(self) -> None:
        if self.connection is not None:
            self.connection.close()

    def is_healthy(self) -> bool:
        return self.connection.is_healthy() if self.connection is not None else True


class ProviderResolver:
    """
    Factory responsible for resolving and instantiating the persistence and
    media adapters selected by the settings.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    def resolve_persistence(self) -> Persistence:
        backend = self.settings.storage_backend
        if backend == StorageBackend.MEMORY:
            store = MemoryStore()
            return Persistence(
                users=MemoryUserRepository(store),
                products=MemoryProductRepository(store),
                orders=MemoryOrderRepository(store),
                unit_of_work=MemoryUnitOfWork(store),
            )

        elif backend == StorageBackend.MONGO:
            connection = MongoConnection(self.settings)
            database = connection.database
            return Persistence(
                users=MongoUserRepository(database),
                products=MongoProductRepository(database),
                orders=MongoOrderRepository(database),
                unit_of_work=MongoUnitOfWork(connection.client, database),
                connection=connection,
            )

        else:
            raise ValueError(f"Unsupported storage backend: {backend}")

    def resolve_image_storage(self) -> ImageStoragePort:
        """Cloudinary when all three credentials are set, local files otherwise."""
        local = LocalImageStorage(self.settings.upload_dir, self.settings.base_url)
        if not self.settings.cloudinary_configured:
            return local
        return CloudinaryImageStorage(
            CloudinaryClient(self.settings), local, self.settings.cloudinary_folder
        )

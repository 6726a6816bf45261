from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import AutoReconnect, ConnectionFailure, PyMongoError

from storefront_api.core.application.exceptions import StorageError
from storefront_api.infrastructure.common.retry import RetryPolicy
from storefront_api.infrastructure.configuration.database_settings import DatabaseSettings
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


def _transient(exc: BaseException) -> bool:
    return isinstance(exc, (ConnectionFailure, AutoReconnect))


class MongoConnection:
    """Owns the client, verifies the server on connect and creates indexes."""

    def __init__(self, settings: DatabaseSettings, client: MongoClient | None = None):
        self.settings = settings
        self.client = client or MongoClient(
            settings.mongodb_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        )
        self.database: Database = self.client[settings.database_name]
        self.retry_policy = RetryPolicy(
            max_attempts=settings.mongodb_connect_attempts, is_retryable=_transient
        )

    def connect(self) -> None:
        try:
            self.retry_policy.run(lambda: self.client.admin.command("ping"))
        except PyMongoError as e:
            logger.error(f"MongoDB connection failed: {e}")
            raise StorageError("Database connection failed", [str(e)]) from e
        self.ensure_indexes()
        logger.info(f"Connected to MongoDB database '{self.database.name}'")

    def ensure_indexes(self) -> None:
        self.database.users.create_index("email", unique=True)
        self.database.users.create_index("username", unique=True)
        self.database.users.create_index("id", unique=True)
        self.database.products.create_index("id", unique=True)
        self.database.products.create_index("name")
        self.database.products.create_index("category")
        self.database.products.create_index("userId")
        self.database.orders.create_index("id", unique=True)
        self.database.orders.create_index([("userId", ASCENDING), ("createdAt", DESCENDING)])
        self.database.orders.create_index([("createdAt", DESCENDING)])

    def is_healthy(self) -> bool:
        try:
            self.client.admin.command("ping")
        except PyMongoError:
            return False
        return True

    def close(self) -> None:
        self.client.close()

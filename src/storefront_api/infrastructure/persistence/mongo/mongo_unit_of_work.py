from collections.abc import Callable
from typing import TypeVar

from pymongo import MongoClient
from pymongo.client_session import ClientSession
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.read_concern import ReadConcern
from pymongo.write_concern import WriteConcern

from storefront_api.core.application.exceptions import StorageError
from storefront_api.core.application.ports import (
    OrderRepositoryPort,
    ProductRepositoryPort,
    TransactionContext,
    UnitOfWorkPort,
)
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)
from storefront_api.infrastructure.persistence.mongo.mongo_order_repository import (
    MongoOrderRepository,
)
from storefront_api.infrastructure.persistence.mongo.mongo_product_repository import (
    MongoProductRepository,
)

_T = TypeVar("_T")

logger = LoggerFactoryService.build_logger(__name__)


class MongoTransactionContext(TransactionContext):
    def __init__(self, database: Database, session: ClientSession):
        self._products = MongoProductRepository(database, session)
        self._orders = MongoOrderRepository(database, session)

    @property
    def products(self) -> ProductRepositoryPort:
        return self._products

    @property
    def orders(self) -> OrderRepositoryPort:
        return self._orders


class MongoUnitOfWork(UnitOfWorkPort):
    """Multi-document transaction on a client session.

    Requires a replica set or sharded cluster. ``with_transaction`` retries
    the callback on transient transaction errors and aborts on anything else.
    """

    def __init__(self, client: MongoClient, database: Database):
        self.client = client
        self.database = database

    def run(self, work: Callable[[TransactionContext], _T]) -> _T:
        try:
            with self.client.start_session() as session:
                return session.with_transaction(
                    lambda s: work(MongoTransactionContext(self.database, s)),
                    read_concern=ReadConcern("snapshot"),
                    write_concern=WriteConcern("majority"),
                )
        except PyMongoError as e:
            logger.error(f"Transaction aborted by the database: {e}")
            raise StorageError("Transaction failed", [str(e)]) from e

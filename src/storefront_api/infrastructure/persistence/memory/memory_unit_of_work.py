from collections.abc import Callable
from typing import TypeVar

from storefront_api.core.application.ports import (
    OrderRepositoryPort,
    ProductRepositoryPort,
    TransactionContext,
    UnitOfWorkPort,
)
from storefront_api.infrastructure.persistence.memory.memory_order_repository import (
    MemoryOrderRepository,
)
from storefront_api.infrastructure.persistence.memory.memory_product_repository import (
    MemoryProductRepository,
)
from storefront_api.infrastructure.persistence.memory.memory_store import MemoryStore

_T = TypeVar("_T")


class MemoryTransactionContext(TransactionContext):
    def __init__(self, store: MemoryStore):
        self._products = MemoryProductRepository(store)
        self._orders = MemoryOrderRepository(store)

    @property
    def products(self) -> ProductRepositoryPort:
        return self._products

    @property
    def orders(self) -> OrderRepositoryPort:
        return self._orders


class MemoryUnitOfWork(UnitOfWorkPort):
    """Serializes transactions on the store lock and restores a snapshot on failure."""

    def __init__(self, store: MemoryStore):
        self.store = store

    def run(self, work: Callable[[TransactionContext], _T]) -> _T:
        with self.store.lock:
            snapshot = self.store.snapshot()
            try:
                return work(MemoryTransactionContext(self.store))
            except BaseException:
                self.store.restore(snapshot)
                raise

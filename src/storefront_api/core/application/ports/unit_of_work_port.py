from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TypeVar

from storefront_api.core.application.ports.order_repository_port import OrderRepositoryPort
from storefront_api.core.application.ports.product_repository_port import ProductRepositoryPort

_T = TypeVar("_T")


class TransactionContext(ABC):
    """Repositories bound to a single open transaction."""

    @property
    @abstractmethod
    def products(self) -> ProductRepositoryPort:
        pass

    @property
    @abstractmethod
    def orders(self) -> OrderRepositoryPort:
        pass


class UnitOfWorkPort(ABC):
    @abstractmethod
    def run(self, work: Callable[[TransactionContext], _T]) -> _T:
        """Runs ``work`` inside one transaction.

        Any exception raised by ``work`` aborts the transaction, discards every
        write made through the context and propagates unchanged.
        """
        pass

from abc import ABC, abstractmethod

from storefront_api.core.domain.ordering import Order


class OrderRepositoryPort(ABC):
    @abstractmethod
    def add(self, order: Order) -> Order:
        pass

    @abstractmethod
    def find_by_id(self, order_id: str) -> Order | None:
        pass

    @abstractmethod
    def list_by_user(self, user_id: str) -> list[Order]:
        """Orders of one user, newest first."""
        pass

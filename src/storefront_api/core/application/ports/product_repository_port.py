from abc import ABC, abstractmethod
from typing import Any

from storefront_api.core.domain.catalog import Product, ProductPage, ProductQuery


class ProductRepositoryPort(ABC):
    @abstractmethod
    def add(self, product: Product) -> Product:
        pass

    @abstractmethod
    def find_by_id(self, product_id: str) -> Product | None:
        pass

    @abstractmethod
    def search(self, query: ProductQuery) -> ProductPage:
        pass

    @abstractmethod
    def update(self, product_id: str, changes: dict[str, Any]) -> Product | None:
        """Applies a partial update and returns the stored result, or None if missing."""
        pass

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        pass

    @abstractmethod
    def decrement_stock(self, product_id: str, quantity: int) -> bool:
        """Atomically subtracts ``quantity`` only while ``stock >= quantity``."""
        pass

    @abstractmethod
    def list_ids(self) -> list[str]:
        pass

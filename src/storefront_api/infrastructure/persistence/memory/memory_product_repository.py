import copy
from typing import Any

from storefront_api.core.application.ports import ProductRepositoryPort
from storefront_api.core.domain.catalog import Product, ProductPage, ProductQuery, ProductSort
from storefront_api.core.domain.shared import utc_now
from storefront_api.infrastructure.persistence.memory.memory_store import MemoryStore

SORT_KEYS = {
    ProductSort.NEWEST: (lambda p: p.created_at, True),
    ProductSort.PRICE_ASC: (lambda p: p.price, False),
    ProductSort.PRICE_DESC: (lambda p: p.price, True),
    ProductSort.NAME_ASC: (lambda p: p.name, False),
    ProductSort.NAME_DESC: (lambda p: p.name, True),
}


def _matches(product: Product, query: ProductQuery) -> bool:
    if query.search and query.search.lower() not in product.name.lower():
        return False
    if query.category and product.category != query.category:
        return False
    return True


class MemoryProductRepository(ProductRepositoryPort):
    def __init__(self, store: MemoryStore):
        self.store = store

    def add(self, product: Product) -> Product:
        with self.store.lock:
            self.store.products[product.id] = copy.deepcopy(product)
        return product

    def find_by_id(self, product_id: str) -> Product | None:
        with self.store.lock:
            product = self.store.products.get(product_id)
            return copy.deepcopy(product) if product else None

    def search(self, query: ProductQuery) -> ProductPage:
        key, reverse = SORT_KEYS[query.sort]
        with self.store.lock:
            matching = [p for p in self.store.products.values() if _matches(p, query)]
            # stable sorts: id first as tie-breaker, then the requested key
            matching.sort(key=lambda p: p.id)
            matching.sort(key=key, reverse=reverse)
            window = matching[query.offset : query.offset + query.page_size]
            return ProductPage(
                items=copy.deepcopy(window),
                page=query.page,
                page_size=query.page_size,
                total_size=len(matching),
            )

    def update(self, product_id: str, changes: dict[str, Any]) -> Product | None:
        with self.store.lock:
            product = self.store.products.get(product_id)
            if product is None:
                return None
            for attr, value in changes.items():
                if not hasattr(product, attr) or attr == "id":
                    raise ValueError(f"Unknown product field: {attr}")
                setattr(product, attr, copy.deepcopy(value))
            return copy.deepcopy(product)

    def delete(self, product_id: str) -> bool:
        with self.store.lock:
            return self.store.products.pop(product_id, None) is not None

    def decrement_stock(self, product_id: str, quantity: int) -> bool:
        with self.store.lock:
            product = self.store.products.get(product_id)
            if product is None or not product.has_stock_for(quantity):
                return False
            product.stock -= quantity
            product.updated_at = utc_now()
            return True

    def list_ids(self) -> list[str]:
        with self.store.lock:
            return list(self.store.products)

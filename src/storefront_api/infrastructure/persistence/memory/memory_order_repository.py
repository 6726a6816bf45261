import copy

from storefront_api.core.application.ports import OrderRepositoryPort
from storefront_api.core.domain.ordering import Order
from storefront_api.infrastructure.persistence.memory.memory_store import MemoryStore


class MemoryOrderRepository(OrderRepositoryPort):
    def __init__(self, store: MemoryStore):
        self.store = store

    def add(self, order: Order) -> Order:
        with self.store.lock:
            self.store.orders[order.id] = copy.deepcopy(order)
        return order

    def find_by_id(self, order_id: str) -> Order | None:
        with self.store.lock:
            order = self.store.orders.get(order_id)
            return copy.deepcopy(order) if order else None

    def list_by_user(self, user_id: str) -> list[Order]:
        with self.store.lock:
            orders = [o for o in self.store.orders.values() if o.user_id == user_id]
            orders.sort(key=lambda o: o.created_at, reverse=True)
            return copy.deepcopy(orders)

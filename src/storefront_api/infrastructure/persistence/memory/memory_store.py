import copy
import threading
from dataclasses import dataclass, field

from storefront_api.core.domain.catalog import Product
from storefront_api.core.domain.identity import User
from storefront_api.core.domain.ordering import Order


@dataclass
class MemoryStore:
    """Process-local collections guarded by one re-entrant lock.

    Repositories hand out copies so callers never mutate stored state.
    """

    users: dict[str, User] = field(default_factory=dict)
    products: dict[str, Product] = field(default_factory=dict)
    orders: dict[str, Order] = field(default_factory=dict)
    lock: threading.RLock = field(default_factory=threading.RLock)

    def snapshot(self) -> tuple[dict, dict, dict]:
        with self.lock:
            return (
                copy.deepcopy(self.users),
                copy.deepcopy(self.products),
                copy.deepcopy(self.orders),
            )

    def restore(self, snapshot: tuple[dict, dict, dict]) -> None:
        with self.lock:
            self.users, self.products, self.orders = snapshot

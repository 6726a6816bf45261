from storefront_api.infrastructure.persistence.memory.memory_order_repository import MemoryOrderRepository
from storefront_api.infrastructure.persistence.memory.memory_product_repository import MemoryProductRepository
from storefront_api.infrastructure.persistence.memory.memory_store import MemoryStore
from storefront_api.infrastructure.persistence.memory.memory_unit_of_work import MemoryUnitOfWork
from storefront_api.infrastructure.persistence.memory.memory_user_repository import MemoryUserRepository

__all__ = [
    "MemoryOrderRepository",
    "MemoryProductRepository",
    "MemoryStore",
    "MemoryUnitOfWork",
    "MemoryUserRepository",
]

from storefront_api.core.application.ports.image_storage_port import ImageStoragePort
from storefront_api.core.application.ports.order_repository_port import OrderRepositoryPort
from storefront_api.core.application.ports.password_hasher_port import PasswordHasherPort
from storefront_api.core.application.ports.product_repository_port import ProductRepositoryPort
from storefront_api.core.application.ports.token_service_port import TokenServicePort
from storefront_api.core.application.ports.unit_of_work_port import TransactionContext, UnitOfWorkPort
from storefront_api.core.application.ports.user_repository_port import UserRepositoryPort

__all__ = [
    "ImageStoragePort",
    "OrderRepositoryPort",
    "PasswordHasherPort",
    "ProductRepositoryPort",
    "TokenServicePort",
    "TransactionContext",
    "UnitOfWorkPort",
    "UserRepositoryPort",
]

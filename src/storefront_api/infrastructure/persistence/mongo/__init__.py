from storefront_api.infrastructure.persistence.mongo.mongo_connection import MongoConnection
from storefront_api.infrastructure.persistence.mongo.mongo_order_repository import MongoOrderRepository
from storefront_api.infrastructure.persistence.mongo.mongo_product_repository import MongoProductRepository
from storefront_api.infrastructure.persistence.mongo.mongo_unit_of_work import MongoUnitOfWork
from storefront_api.infrastructure.persistence.mongo.mongo_user_repository import MongoUserRepository

__all__ = [
    "MongoConnection",
    "MongoOrderRepository",
    "MongoProductRepository",
    "MongoUnitOfWork",
    "MongoUserRepository",
]

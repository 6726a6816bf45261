from pymongo import DESCENDING
from pymongo.client_session import ClientSession
from pymongo.database import Database

from storefront_api.core.application.ports import OrderRepositoryPort
from storefront_api.core.domain.ordering import Order
from storefront_api.infrastructure.persistence.mongo.document_mappers import (
    NO_MONGO_ID,
    order_from_document,
    order_to_document,
)


class MongoOrderRepository(OrderRepositoryPort):
    def __init__(self, database: Database, session: ClientSession | None = None):
        self.collection = database.orders
        self.session = session

    def add(self, order: Order) -> Order:
        self.collection.insert_one(order_to_document(order), session=self.session)
        return order

    def find_by_id(self, order_id: str) -> Order | None:
        doc = self.collection.find_one({"id": order_id}, NO_MONGO_ID, session=self.session)
        return order_from_document(doc) if doc else None

    def list_by_user(self, user_id: str) -> list[Order]:
        cursor = self.collection.find({"userId": user_id}, NO_MONGO_ID, session=self.session).sort(
            "createdAt", DESCENDING
        )
        return [order_from_document(doc) for doc in cursor]

import re
from typing import Any

from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.client_session import ClientSession
from pymongo.database import Database

from storefront_api.core.application.ports import ProductRepositoryPort
from storefront_api.core.domain.catalog import Product, ProductPage, ProductQuery, ProductSort
from storefront_api.core.domain.shared import utc_now
from storefront_api.infrastructure.persistence.mongo.document_mappers import (
    NO_MONGO_ID,
    product_changes_to_document,
    product_from_document,
    product_to_document,
)

SORT_ORDERS: dict[ProductSort, list[tuple[str, int]]] = {
    ProductSort.NEWEST: [("createdAt", DESCENDING)],
    ProductSort.PRICE_ASC: [("price", ASCENDING)],
    ProductSort.PRICE_DESC: [("price", DESCENDING)],
    ProductSort.NAME_ASC: [("name", ASCENDING)],
    ProductSort.NAME_DESC: [("name", DESCENDING)],
}


def build_filter(query: ProductQuery) -> dict[str, Any]:
    conditions: dict[str, Any] = {}
    if query.search:
        conditions["name"] = {"$regex": re.escape(query.search), "$options": "i"}
    if query.category:
        conditions["category"] = query.category
    return conditions


class MongoProductRepository(ProductRepositoryPort):
    def __init__(self, database: Database, session: ClientSession | None = None):
        self.collection = database.products
        self.session = session

    def add(self, product: Product) -> Product:
        self.collection.insert_one(product_to_document(product), session=self.session)
        return product

    def find_by_id(self, product_id: str) -> Product | None:
        doc = self.collection.find_one({"id": product_id}, NO_MONGO_ID, session=self.session)
        return product_from_document(doc) if doc else None

    def search(self, query: ProductQuery) -> ProductPage:
        conditions = build_filter(query)
        total = self.collection.count_documents(conditions, session=self.session)
        cursor = (
            self.collection.find(conditions, NO_MONGO_ID, session=self.session)
            .sort([*SORT_ORDERS[query.sort], ("id", ASCENDING)])
            .skip(query.offset)
            .limit(query.page_size)
        )
        return ProductPage(
            items=[product_from_document(doc) for doc in cursor],
            page=query.page,
            page_size=query.page_size,
            total_size=total,
        )

    def update(self, product_id: str, changes: dict[str, Any]) -> Product | None:
        doc = self.collection.find_one_and_update(
            {"id": product_id},
            {"$set": product_changes_to_document(changes)},
            projection=NO_MONGO_ID,
            return_document=ReturnDocument.AFTER,
            session=self.session,
        )
        return product_from_document(doc) if doc else None

    def delete(self, product_id: str) -> bool:
        result = self.collection.delete_one({"id": product_id}, session=self.session)
        return result.deleted_count == 1

    def decrement_stock(self, product_id: str, quantity: int) -> bool:
        result = self.collection.update_one(
            {"id": product_id, "stock": {"$gte": quantity}},
            {"$inc": {"stock": -quantity}, "$set": {"updatedAt": utc_now()}},
            session=self.session,
        )
        return result.modified_count == 1

    def list_ids(self) -> list[str]:
        return [
            doc["id"]
            for doc in self.collection.find({}, {"_id": False, "id": True}, session=self.session)
        ]

from pymongo.client_session import ClientSession
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError

from storefront_api.core.application.exceptions import DuplicateKeyError
from storefront_api.core.application.ports import UserRepositoryPort
from storefront_api.core.domain.identity import User, UserRole
from storefront_api.core.domain.shared import utc_now
from storefront_api.infrastructure.persistence.mongo.document_mappers import (
    NO_MONGO_ID,
    user_from_document,
    user_to_document,
)


def duplicate_field(error: MongoDuplicateKeyError) -> str:
    """Name of the field whose unique index rejected the write."""
    key_pattern = (error.details or {}).get("keyPattern") or {}
    if key_pattern:
        return next(iter(key_pattern))
    message = str(error)
    for field in ("email", "username", "id"):
        if f"{field}_1" in message:
            return field
    return "value"


class MongoUserRepository(UserRepositoryPort):
    def __init__(self, database: Database, session: ClientSession | None = None):
        self.collection = database.users
        self.session = session

    def add(self, user: User) -> User:
        try:
            self.collection.insert_one(user_to_document(user), session=self.session)
        except MongoDuplicateKeyError as e:
            raise DuplicateKeyError(duplicate_field(e)) from e
        return user

    def find_by_id(self, user_id: str) -> User | None:
        return self._find_one({"id": user_id})

    def find_by_email(self, email: str) -> User | None:
        return self._find_one({"email": email})

    def find_by_username(self, username: str) -> User | None:
        return self._find_one({"username": username})

    def update_role(self, user_id: str, role: UserRole) -> bool:
        result = self.collection.update_one(
            {"id": user_id},
            {"$set": {"role": role.value, "updatedAt": utc_now()}},
            session=self.session,
        )
        return result.matched_count == 1

    def add_favorite(self, user_id: str, product_id: str) -> bool:
        result = self.collection.update_one(
            {"id": user_id, "favorites": {"$ne": product_id}},
            {"$addToSet": {"favorites": product_id}, "$set": {"updatedAt": utc_now()}},
            session=self.session,
        )
        return result.modified_count == 1

    def remove_favorite(self, user_id: str, product_id: str) -> bool:
        result = self.collection.update_one(
            {"id": user_id, "favorites": product_id},
            {"$pull": {"favorites": product_id}, "$set": {"updatedAt": utc_now()}},
            session=self.session,
        )
        return result.modified_count == 1

    def list_favorites(self, user_id: str) -> list[str]:
        doc = self.collection.find_one(
            {"id": user_id}, {"_id": False, "favorites": True}, session=self.session
        )
        return list(doc.get("favorites") or []) if doc else []

    def _find_one(self, query: dict) -> User | None:
        doc = self.collection.find_one(query, NO_MONGO_ID, session=self.session)
        return user_from_document(doc) if doc else None

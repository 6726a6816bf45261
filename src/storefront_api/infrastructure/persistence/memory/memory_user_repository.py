import copy

from storefront_api.core.application.exceptions import DuplicateKeyError
from storefront_api.core.application.ports import UserRepositoryPort
from storefront_api.core.domain.identity import User, UserRole
from storefront_api.core.domain.shared import utc_now
from storefront_api.infrastructure.persistence.memory.memory_store import MemoryStore


class MemoryUserRepository(UserRepositoryPort):
    def __init__(self, store: MemoryStore):
        self.store = store

    def add(self, user: User) -> User:
        with self.store.lock:
            for existing in self.store.users.values():
                if existing.email == user.email:
                    raise DuplicateKeyError("email")
                if existing.username == user.username:
                    raise DuplicateKeyError("username")
            self.store.users[user.id] = copy.deepcopy(user)
        return user

    def find_by_id(self, user_id: str) -> User | None:
        with self.store.lock:
            user = self.store.users.get(user_id)
            return copy.deepcopy(user) if user else None

    def find_by_email(self, email: str) -> User | None:
        return self._find(lambda user: user.email == email)

    def find_by_username(self, username: str) -> User | None:
        return self._find(lambda user: user.username == username)

    def update_role(self, user_id: str, role: UserRole) -> bool:
        with self.store.lock:
            user = self.store.users.get(user_id)
            if user is None:
                return False
            user.role = role
            user.updated_at = utc_now()
            return True

    def add_favorite(self, user_id: str, product_id: str) -> bool:
        with self.store.lock:
            user = self.store.users.get(user_id)
            if user is None or user.has_favorite(product_id):
                return False
            user.favorites.append(product_id)
            user.updated_at = utc_now()
            return True

    def remove_favorite(self, user_id: str, product_id: str) -> bool:
        with self.store.lock:
            user = self.store.users.get(user_id)
            if user is None or not user.has_favorite(product_id):
                return False
            user.favorites.remove(product_id)
            user.updated_at = utc_now()
            return True

    def list_favorites(self, user_id: str) -> list[str]:
        with self.store.lock:
            user = self.store.users.get(user_id)
            return list(user.favorites) if user else []

    def _find(self, matches) -> User | None:
        with self.store.lock:
            for user in self.store.users.values():
                if matches(user):
                    return copy.deepcopy(user)
        return None

from abc import ABC, abstractmethod

from storefront_api.core.domain.identity import User, UserRole


class UserRepositoryPort(ABC):
    @abstractmethod
    def add(self, user: User) -> User:
        """Inserts a new user. Raises DuplicateKeyError on email/username clash."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: str) -> User | None:
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        pass

    @abstractmethod
    def find_by_username(self, username: str) -> User | None:
        pass

    @abstractmethod
    def update_role(self, user_id: str, role: UserRole) -> bool:
        pass

    @abstractmethod
    def add_favorite(self, user_id: str, product_id: str) -> bool:
        """Returns False when nothing changed (unknown user or already a favorite)."""
        pass

    @abstractmethod
    def remove_favorite(self, user_id: str, product_id: str) -> bool:
        pass

    @abstractmethod
    def list_favorites(self, user_id: str) -> list[str]:
        pass

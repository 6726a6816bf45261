from dataclasses import dataclass, field
from datetime import datetime

from storefront_api.core.domain.identity.user_role import UserRole
from storefront_api.core.domain.shared import new_id, utc_now


@dataclass
class User:
    """Registered account. ``password_hash`` never leaves the persistence layer."""

    username: str
    email: str
    password_hash: str
    role: UserRole = UserRole.USER
    favorites: list[str] = field(default_factory=list)
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def has_favorite(self, product_id: str) -> bool:
        return product_id in self.favorites

from dataclasses import dataclass

from storefront_api.core.domain.identity.user_role import UserRole


@dataclass(frozen=True)
class AuthClaims:
    """Decoded bearer token attached to an authenticated request."""

    user_id: str
    username: str
    email: str
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

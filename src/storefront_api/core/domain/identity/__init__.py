from storefront_api.core.domain.identity.auth_claims import AuthClaims
from storefront_api.core.domain.identity.user import User
from storefront_api.core.domain.identity.user_role import UserRole

__all__ = ["AuthClaims", "User", "UserRole"]

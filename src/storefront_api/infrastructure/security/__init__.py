from storefront_api.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from storefront_api.infrastructure.security.jwt_token_service import JwtTokenService

__all__ = ["BcryptPasswordHasher", "JwtTokenService"]

from datetime import timedelta

import jwt

from storefront_api.core.application.exceptions import AuthenticationError
from storefront_api.core.application.ports import TokenServicePort
from storefront_api.core.domain.identity import AuthClaims, User, UserRole
from storefront_api.core.domain.shared import utc_now
from storefront_api.infrastructure.configuration.auth_settings import AuthSettings

REQUIRED_CLAIMS = ["userId", "exp", "iat"]


class JwtTokenService(TokenServicePort):
    """HMAC-signed access tokens carrying the user id, names and role."""

    def __init__(self, settings: AuthSettings):
        self.secret = settings.jwt_secret.get_secret_value()
        self.algorithm = settings.jwt_algorithm
        self.lifetime = timedelta(hours=settings.jwt_expires_in_hours)

    def issue(self, user: User) -> str:
        issued_at = utc_now()
        payload = {
            "userId": user.id,
            "username": user.username,
            "email": user.email,
            "role": user.role.value,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> AuthClaims:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
            role = UserRole(payload.get("role", UserRole.USER.value))
        except (jwt.PyJWTError, ValueError) as e:
            raise AuthenticationError(
                "Access denied", ["Invalid or expired authentication token"]
            ) from e
        return AuthClaims(
            user_id=payload["userId"],
            username=payload.get("username", ""),
            email=payload.get("email", ""),
            role=role,
        )

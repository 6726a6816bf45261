from dataclasses import dataclass
from typing import Any

from storefront_api.core.application.exceptions import AuthenticationError, ValidationError
from storefront_api.core.application.ports import (
    PasswordHasherPort,
    TokenServicePort,
    UserRepositoryPort,
)
from storefront_api.core.application.validation import validate_email
from storefront_api.core.domain.identity import User
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User


class LoginUseCase:
    def __init__(
        self,
        users: UserRepositoryPort,
        hasher: PasswordHasherPort,
        tokens: TokenServicePort,
    ):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens

    def execute(self, email: Any, password: Any) -> LoginResult:
        if not email or not password:
            raise ValidationError("Login failed", ["Email and password are required"])
        email = email.strip().lower() if isinstance(email, str) else email
        if not validate_email(email):
            raise ValidationError("Login failed", ["Email must be a valid email address format"])

        user = self.users.find_by_email(email)
        if user is None or not self.hasher.verify(str(password), user.password_hash):
            logger.warning("Rejected login attempt with invalid credentials")
            raise AuthenticationError("Invalid credentials", ["Email or password is incorrect"])

        return LoginResult(token=self.tokens.issue(user), user=user)

from typing import Any

from storefront_api.core.application.exceptions import DuplicateKeyError, ValidationError
from storefront_api.core.application.ports import PasswordHasherPort, UserRepositoryPort
from storefront_api.core.application.validation import (
    validate_email,
    validate_password,
    validate_username,
)
from storefront_api.core.domain.identity import User
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)

FAILURE = "Registration failed"


class RegisterUserUseCase:
    def __init__(self, users: UserRepositoryPort, hasher: PasswordHasherPort):
        self.users = users
        self.hasher = hasher

    def execute(self, username: Any, email: Any, password: Any) -> User:
        if not username or not email or not password:
            raise ValidationError(FAILURE, ["Username, email, and password are required"])

        username_errors = validate_username(username)
        if username_errors:
            raise ValidationError(FAILURE, username_errors)

        email = email.strip().lower() if isinstance(email, str) else email
        if not validate_email(email):
            raise ValidationError(
                FAILURE, ["Email must be a valid email address format (e.g., user@example.com)"]
            )

        password_errors = validate_password(password)
        if password_errors:
            raise ValidationError(FAILURE, password_errors)

        if self.users.find_by_email(email):
            raise ValidationError(FAILURE, ["The email is already registered"])
        if self.users.find_by_username(username):
            raise ValidationError(FAILURE, ["The username is already taken"])

        user = User(username=username, email=email, password_hash=self.hasher.hash(password))
        try:
            created = self.users.add(user)
        except DuplicateKeyError as e:
            # lost a race against a concurrent registration
            message = (
                "The username is already taken"
                if e.field == "username"
                else f"The {e.field} is already registered"
            )
            raise ValidationError(FAILURE, [message]) from e

        logger.info(f"Registered user {created.id} ({created.username})")
        return created

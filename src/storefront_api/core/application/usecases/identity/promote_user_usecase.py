from storefront_api.core.application.exceptions import NotFoundError
from storefront_api.core.application.ports import UserRepositoryPort
from storefront_api.core.domain.identity import User, UserRole


class PromoteUserUseCase:
    """Grants the admin role to an existing account."""

    def __init__(self, users: UserRepositoryPort):
        self.users = users

    def execute(self, email: str) -> User:
        user = self.users.find_by_email(email.strip().lower())
        if user is None:
            raise NotFoundError("User not found", [f"No user registered with email {email}"])
        if not user.is_admin:
            self.users.update_role(user.id, UserRole.ADMIN)
            user.role = UserRole.ADMIN
        return user

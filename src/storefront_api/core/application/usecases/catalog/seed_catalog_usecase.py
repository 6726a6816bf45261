from dataclasses import dataclass, field
from typing import Any

from storefront_api.core.application.exceptions import ValidationError
from storefront_api.core.application.ports import (
    PasswordHasherPort,
    ProductRepositoryPort,
    UserRepositoryPort,
)
from storefront_api.core.application.validation import (
    normalize_product,
    validate_email,
    validate_password,
    validate_product,
    validate_username,
)
from storefront_api.core.domain.catalog import Product
from storefront_api.core.domain.identity import User, UserRole
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


@dataclass
class SeedReport:
    created: int = 0
    skipped: list[str] = field(default_factory=list)
    admin_id: str | None = None


class SeedCatalogUseCase:
    """Loads an initial catalog, optionally creating the admin that owns it.

    The payload has the shape ``{"admin": {...}, "products": [...]}``. Products
    that fail validation are skipped and reported, the rest are inserted.
    """

    def __init__(
        self,
        users: UserRepositoryPort,
        products: ProductRepositoryPort,
        hasher: PasswordHasherPort,
    ):
        self.users = users
        self.products = products
        self.hasher = hasher

    def execute(self, payload: dict[str, Any]) -> SeedReport:
        report = SeedReport()
        admin = payload.get("admin")
        if admin:
            report.admin_id = self._ensure_admin(admin).id

        for index, entry in enumerate(payload.get("products") or [], start=1):
            if not isinstance(entry, dict):
                report.skipped.append(f"Product {index}: entry must be a mapping")
                continue
            errors = validate_product(entry)
            if errors:
                report.skipped.append(f"Product {index}: {'; '.join(errors)}")
                continue
            self.products.add(Product(**normalize_product(entry), user_id=report.admin_id))
            report.created += 1

        logger.info(f"Seeded {report.created} products, skipped {len(report.skipped)}")
        return report

    def _ensure_admin(self, data: dict[str, Any]) -> User:
        email = str(data.get("email", "")).strip().lower()
        existing = self.users.find_by_email(email)
        if existing:
            if not existing.is_admin:
                self.users.update_role(existing.id, UserRole.ADMIN)
                existing.role = UserRole.ADMIN
            return existing

        username = data.get("username")
        password = data.get("password")
        errors = validate_username(username) + validate_password(password)
        if not validate_email(email):
            errors.append("Email must be a valid email address format")
        if errors:
            raise ValidationError("Invalid admin account", errors)

        return self.users.add(
            User(
                username=username,
                email=email,
                password_hash=self.hasher.hash(password),
                role=UserRole.ADMIN,
            )
        )

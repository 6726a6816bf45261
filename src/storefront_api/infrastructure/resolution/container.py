from dataclasses import dataclass, field

from storefront_api.core.application.ports import ImageStoragePort
from storefront_api.core.application.usecases.catalog import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    SeedCatalogUseCase,
    UpdateProductUseCase,
)
from storefront_api.core.application.usecases.favorites import ManageFavoritesUseCase
from storefront_api.core.application.usecases.identity import (
    LoginUseCase,
    PromoteUserUseCase,
    RegisterUserUseCase,
)
from storefront_api.core.application.usecases.media import (
    DeleteProductImagesUseCase,
    StorageMaintenanceUseCase,
    UploadProductImagesUseCase,
)
from storefront_api.core.application.usecases.ordering import (
    ListUserOrdersUseCase,
    PlaceOrderUseCase,
)
from storefront_api.core.application.validation import UploadPolicy
from storefront_api.infrastructure.cache import ResponseCacheService
from storefront_api.infrastructure.configuration.main_settings import Settings
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)
from storefront_api.infrastructure.rate_limiting import FixedWindowRateLimiter, RateLimitRules
from storefront_api.infrastructure.resolution.provider_resolver import Persistence, ProviderResolver
from storefront_api.infrastructure.security import BcryptPasswordHasher, JwtTokenService

logger = LoggerFactoryService.build_logger(__name__)


@dataclass
class Container:
    """Process-wide object graph. Use cases are cheap and built per call."""

    settings: Settings
    persistence: Persistence
    image_storage: ImageStoragePort
    hasher: BcryptPasswordHasher
    tokens: JwtTokenService
    cache: ResponseCacheService
    rate_limiter: FixedWindowRateLimiter
    rate_limits: RateLimitRules
    upload_policy: UploadPolicy = field(init=False)

    def __post_init__(self) -> None:
        self.upload_policy = UploadPolicy(
            max_file_size=self.settings.max_file_size, max_files=self.settings.max_files
        )

    # identity
    def register_user(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(self.persistence.users, self.hasher)

    def login(self) -> LoginUseCase:
        return LoginUseCase(self.persistence.users, self.hasher, self.tokens)

    def promote_user(self) -> PromoteUserUseCase:
        return PromoteUserUseCase(self.persistence.users)

    # catalog
    def create_product(self) -> CreateProductUseCase:
        return CreateProductUseCase(self.persistence.products)

    def update_product(self) -> UpdateProductUseCase:
        return UpdateProductUseCase(self.persistence.products)

    def delete_product(self) -> DeleteProductUseCase:
        return DeleteProductUseCase(self.persistence.products)

    def get_product(self) -> GetProductUseCase:
        return GetProductUseCase(self.persistence.products)

    def list_products(self) -> ListProductsUseCase:
        return ListProductsUseCase(self.persistence.products)

    def seed_catalog(self) -> SeedCatalogUseCase:
        return SeedCatalogUseCase(self.persistence.users, self.persistence.products, self.hasher)

    # ordering
    def place_order(self) -> PlaceOrderUseCase:
        return PlaceOrderUseCase(self.persistence.unit_of_work)

    def list_user_orders(self) -> ListUserOrdersUseCase:
        return ListUserOrdersUseCase(self.persistence.orders)

    # favorites
    def favorites(self) -> ManageFavoritesUseCase:
        return ManageFavoritesUseCase(self.persistence.users, self.persistence.products)

    # media
    def upload_product_images(self) -> UploadProductImagesUseCase:
        return UploadProductImagesUseCase(
            self.persistence.products, self.image_storage, self.upload_policy
        )

    def delete_product_images(self) -> DeleteProductImagesUseCase:
        return DeleteProductImagesUseCase(self.persistence.products, self.image_storage)

    def storage_maintenance(self) -> StorageMaintenanceUseCase:
        return StorageMaintenanceUseCase(self.persistence.products, self.image_storage)


def build_container(settings: Settings) -> Container:
    if settings.has_weak_secret:
        logger.warning("JWT_SECRET is shorter than 32 characters; use a longer random secret")

    resolver = ProviderResolver(settings)
    image_storage = resolver.resolve_image_storage()
    logger.info(f"Image storage provider: {image_storage.provider.value}")
    return Container(
        settings=settings,
        persistence=resolver.resolve_persistence(),
        image_storage=image_storage,
        hasher=BcryptPasswordHasher(settings.bcrypt_rounds),
        tokens=JwtTokenService(settings),
        cache=ResponseCacheService(settings),
        rate_limiter=FixedWindowRateLimiter(enabled=settings.rate_limit_enabled),
        rate_limits=RateLimitRules.from_settings(settings),
    )

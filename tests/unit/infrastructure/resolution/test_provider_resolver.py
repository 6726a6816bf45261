from storefront_api.core.domain.media import StorageProvider
from storefront_api.infrastructure.configuration.main_settings import Settings
from storefront_api.infrastructure.media.cloudinary import CloudinaryImageStorage
from storefront_api.infrastructure.media.local_image_storage import LocalImageStorage
from storefront_api.infrastructure.persistence.memory import MemoryUserRepository
from storefront_api.infrastructure.persistence.mongo import MongoUserRepository
from storefront_api.infrastructure.resolution import build_container
from storefront_api.infrastructure.resolution.provider_resolver import ProviderResolver


def test_memory_backend(settings):
    persistence = ProviderResolver(settings).resolve_persistence()

    assert isinstance(persistence.users, MemoryUserRepository)
    assert persistence.connection is None
    assert persistence.is_healthy()


def test_mongo_backend_builds_lazily(settings):
    mongo_settings = settings.model_copy(
        update={"storage_backend": "mongo", "mongodb_uri": "mongodb://localhost:27017/shop_test"}
    )

    persistence = ProviderResolver(mongo_settings).resolve_persistence()

    assert isinstance(persistence.users, MongoUserRepository)
    assert persistence.connection.database.name == "shop_test"
    persistence.connection.client.close()


def test_local_storage_without_cloudinary_credentials(settings):
    storage = ProviderResolver(settings).resolve_image_storage()

    assert isinstance(storage, LocalImageStorage)
    assert storage.provider == StorageProvider.LOCAL


def test_cloudinary_storage_with_credentials(upload_dir):
    settings = Settings(
        _env_file=None,
        storage_backend="memory",
        jwt_secret="x" * 40,
        upload_dir=upload_dir,
        cloudinary_cloud_name="demo",
        cloudinary_api_key="key",
        cloudinary_api_secret="secret",
    )

    storage = ProviderResolver(settings).resolve_image_storage()

    assert isinstance(storage, CloudinaryImageStorage)
    assert storage.provider == StorageProvider.CLOUDINARY


def test_container_builds_use_cases(settings):
    container = build_container(settings)

    assert container.upload_policy.max_files == settings.max_files
    assert container.place_order().unit_of_work is container.persistence.unit_of_work

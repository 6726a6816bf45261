from unittest.mock import MagicMock

import pytest

from storefront_api.core.application.exceptions import (
    ImageProcessingError,
    NotFoundError,
    StorageError,
    UploadError,
)
from storefront_api.core.application.usecases.media import (
    DeleteProductImagesUseCase,
    StorageMaintenanceUseCase,
    UploadProductImagesUseCase,
)
from storefront_api.core.application.validation import UploadPolicy
from storefront_api.core.domain.media import (
    ImageUpload,
    StorageProvider,
    StoredImage,
    images_document,
    images_from_document,
)
from storefront_api.infrastructure.media.local_image_storage import LocalImageStorage


def stored_image(product_id: str, name: str = "photo.png") -> StoredImage:
    return StoredImage(
        product_id=product_id,
        provider=StorageProvider.LOCAL,
        original_filename=name,
        original_size=3,
        mime_type="image/png",
        urls={"thumbnail": f"http://cdn/{name}/t", "original": f"http://cdn/{name}/o"},
        files={"thumbnail": f"thumbnails/{name}"},
    )


def upload(name: str = "photo.png") -> ImageUpload:
    return ImageUpload(filename=name, content_type="image/png", data=b"png")


@pytest.fixture
def storage():
    storage = MagicMock()
    storage.provider = StorageProvider.LOCAL
    storage.store.side_effect = lambda up, product_id: stored_image(product_id, up.filename)
    return storage


@pytest.fixture
def policy():
    return UploadPolicy(max_file_size=1024, max_files=3)


@pytest.fixture
def usecase(products, storage, policy):
    return UploadProductImagesUseCase(products, storage, policy)


class TestUploadProductImages:
    def test_stores_images_on_product(self, usecase, products, make_product):
        product = make_product()

        outcome = usecase.execute(product.id, [upload("a.png"), upload("b.png")])

        assert outcome.total_files == 2
        assert outcome.errors == []
        saved = products.find_by_id(product.id).images
        assert saved["totalImages"] == 2
        assert [i.original_filename for i in images_from_document(product.id, saved)] == [
            "a.png",
            "b.png",
        ]

    def test_replaces_and_removes_previous_images(self, usecase, products, storage, make_product):
        old = stored_image("pid", "old.png")
        product = make_product(images=images_document([old]))

        usecase.execute(product.id, [upload("new.png")])

        removed = storage.remove.call_args.args[0]
        assert removed.original_filename == "old.png"

    def test_no_files(self, usecase, make_product):
        product = make_product()
        with pytest.raises(UploadError) as exc:
            usecase.execute(product.id, [], single=True)
        assert exc.value.message == "No file uploaded"

        with pytest.raises(UploadError) as exc:
            usecase.execute(product.id, [])
        assert exc.value.message == "No images uploaded"

    def test_policy_runs_before_product_lookup(self, usecase):
        with pytest.raises(UploadError) as exc:
            usecase.execute("ghost", [upload()] * 4)
        assert exc.value.message == "Too many files"

    def test_unknown_product(self, usecase):
        with pytest.raises(NotFoundError):
            usecase.execute("ghost", [upload()])

    def test_partial_failures_are_collected(self, usecase, storage, make_product):
        product = make_product()

        def store(up, product_id):
            if up.filename == "bad.png":
                raise ImageProcessingError("Image processing failed", ["Invalid image"])
            return stored_image(product_id, up.filename)

        storage.store.side_effect = store

        outcome = usecase.execute(product.id, [upload("good.png"), upload("bad.png")])

        assert [i.original_filename for i in outcome.images] == ["good.png"]
        assert outcome.errors == ["Image 2 (bad.png): Invalid image"]

    def test_single_mode_raises_first_failure(self, usecase, storage, make_product):
        product = make_product()
        storage.store.side_effect = ImageProcessingError("Image processing failed", ["boom"])

        with pytest.raises(ImageProcessingError) as exc:
            usecase.execute(product.id, [upload()], single=True)
        assert exc.value.errors == ["boom"]

    def test_all_failures(self, usecase, storage, make_product):
        product = make_product()
        storage.store.side_effect = ImageProcessingError("Image processing failed", ["boom"])

        with pytest.raises(ImageProcessingError) as exc:
            usecase.execute(product.id, [upload("x.png")])
        assert exc.value.errors == ["Image 1 (x.png): boom"]

    def test_failed_product_update_discards_new_assets(self, storage, policy, make_product):
        product = make_product()
        products = MagicMock()
        products.find_by_id.return_value = product
        products.update.return_value = None

        with pytest.raises(StorageError) as exc:
            UploadProductImagesUseCase(products, storage, policy).execute(
                product.id, [upload("new.png")]
            )

        assert exc.value.errors == ["Failed to update product with image data"]
        assert storage.remove.call_args.args[0].original_filename == "new.png"

    def test_raising_update_discards_new_assets(self, make_product, image_bytes, upload_dir):
        product = make_product()
        products = MagicMock()
        products.find_by_id.return_value = product
        products.update.side_effect = StorageError("Database error", ["connection reset"])
        storage = LocalImageStorage(upload_dir, "http://shop.test/")
        photo = ImageUpload("photo.png", "image/png", image_bytes("PNG", (320, 240)))
        policy = UploadPolicy(max_file_size=1024 * 1024, max_files=1)

        with pytest.raises(StorageError):
            UploadProductImagesUseCase(products, storage, policy).execute(product.id, [photo])

        assert [path for path in upload_dir.rglob("*") if path.is_file()] == []


def test_delete_product_images(products, storage, make_product):
    product = make_product(images=images_document([stored_image("pid")]))

    DeleteProductImagesUseCase(products, storage).execute(product.id)

    storage.remove.assert_called_once()
    assert products.find_by_id(product.id).images is None


def test_delete_clears_product_before_removing_assets(products, storage, make_product):
    product = make_product(images=images_document([stored_image("pid")]))
    storage.remove.side_effect = StorageError("Image deletion failed", ["disk gone"])

    DeleteProductImagesUseCase(products, storage).execute(product.id)

    storage.remove.assert_called_once()
    assert products.find_by_id(product.id).images is None


def test_failed_product_update_keeps_assets(storage, make_product):
    product = make_product(images=images_document([stored_image("pid")]))
    products = MagicMock()
    products.find_by_id.return_value = product
    products.update.return_value = None

    with pytest.raises(StorageError):
        DeleteProductImagesUseCase(products, storage).execute(product.id)

    storage.remove.assert_not_called()


def test_delete_images_of_unknown_product(products, storage):
    with pytest.raises(NotFoundError):
        DeleteProductImagesUseCase(products, storage).execute("ghost")


def test_cleanup_passes_active_ids(products, storage, make_product):
    product = make_product()
    storage.cleanup_orphans.return_value = 3
    storage.storage_stats.return_value = {"totalFiles": 0}

    report = StorageMaintenanceUseCase(products, storage).cleanup()

    storage.cleanup_orphans.assert_called_once_with({product.id})
    assert report["removedFiles"] == 3
    assert report["activeProducts"] == 1
    assert report["storageStats"] == {"totalFiles": 0}

import pytest

from storefront_api.core.domain.media import ImageUpload, StorageProvider
from storefront_api.core.domain.shared import new_id
from storefront_api.infrastructure.media.local_image_storage import LocalImageStorage


@pytest.fixture
def storage(tmp_path):
    return LocalImageStorage(tmp_path / "uploads", "http://shop.test/")


@pytest.fixture
def upload(image_bytes):
    return ImageUpload("photo.jpg", "image/jpeg", image_bytes("JPEG", (800, 600)))


def test_store_writes_every_size(storage, upload, tmp_path):
    product_id = new_id()

    image = storage.store(upload, product_id)

    assert image.provider == StorageProvider.LOCAL
    assert set(image.files) == {"thumbnail", "medium", "large"}
    for relative in image.files.values():
        path = tmp_path / "uploads" / relative
        assert path.is_file()
        assert path.name.startswith(f"{product_id}_")
        assert path.suffix == ".webp"
    assert image.urls["thumbnail"].startswith("http://shop.test/uploads/thumbnails/")
    assert image.urls["original"] == image.urls["large"]
    assert (image.width, image.height, image.format) == (800, 600, "jpeg")


def test_remove_deletes_files(storage, upload, tmp_path):
    image = storage.store(upload, new_id())

    storage.remove(image)

    assert not any((tmp_path / "uploads" / rel).exists() for rel in image.files.values())


def test_remove_refuses_paths_outside_uploads(storage, upload, tmp_path):
    outside = tmp_path / "keep.txt"
    outside.write_text("keep")
    image = storage.store(upload, new_id())
    image.files["thumbnail"] = "../keep.txt"

    storage.remove(image)

    assert outside.exists()


def test_stats_count_files_per_directory(storage, upload):
    storage.store(upload, new_id())

    stats = storage.storage_stats()

    assert stats["provider"] == "Local Storage"
    assert stats["totalFiles"] == 3
    assert stats["directories"]["thumbnails"]["fileCount"] == 1
    assert stats["totalSizeBytes"] > 0


def test_cleanup_removes_only_orphans(storage, upload):
    kept_id, orphan_id = new_id(), new_id()
    kept = storage.store(upload, kept_id)
    storage.store(upload, orphan_id)
    (storage.upload_dir / "images" / "README.txt").write_text("not an upload")

    removed = storage.cleanup_orphans({kept_id})

    assert removed == 3
    assert all((storage.upload_dir / rel).exists() for rel in kept.files.values())
    assert (storage.upload_dir / "images" / "README.txt").exists()


def test_stats_on_empty_directory(tmp_path):
    stats = LocalImageStorage(tmp_path / "missing", "http://x").storage_stats()
    assert stats["totalFiles"] == 0
    assert stats["totalSize"] == "0 B"

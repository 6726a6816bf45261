import re
import secrets
import time
from pathlib import Path
from typing import Any

from storefront_api.core.application.exceptions import StorageError
from storefront_api.core.application.ports import ImageStoragePort
from storefront_api.core.domain.media import (
    ImageUpload,
    StorageProvider,
    StoredImage,
    VariantName,
)
from storefront_api.infrastructure.media.pillow_image_processor import PillowImageProcessor
from storefront_api.infrastructure.media.size_formatter import format_size
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)

UPLOADS_URL_PATH = "/uploads"

VARIANT_DIRECTORIES = {
    VariantName.THUMBNAIL: "thumbnails",
    VariantName.MEDIUM: "medium",
    VariantName.LARGE: "images",
}

# files are named {productId}_{timestamp}_{random}_{size}.webp
PRODUCT_PREFIX = re.compile(r"^([0-9a-fA-F-]{36})_")


class LocalImageStorage(ImageStoragePort):
    def __init__(
        self,
        upload_dir: Path,
        base_url: str,
        processor: PillowImageProcessor | None = None,
    ):
        self.upload_dir = Path(upload_dir)
        self.base_url = base_url.rstrip("/")
        self.processor = processor or PillowImageProcessor()

    @property
    def provider(self) -> StorageProvider:
        return StorageProvider.LOCAL

    def initialize(self) -> None:
        for directory in VARIANT_DIRECTORIES.values():
            (self.upload_dir / directory).mkdir(parents=True, exist_ok=True)

    def store(self, upload: ImageUpload, product_id: str) -> StoredImage:
        processed = self.processor.process(upload.data)
        self.initialize()

        stem = f"{product_id}_{int(time.time() * 1000)}_{secrets.token_hex(4)}"
        files: dict[str, str] = {}
        urls: dict[str, str] = {}
        try:
            for variant in processed.variants:
                relative = f"{VARIANT_DIRECTORIES[variant.name]}/{stem}_{variant.name}.webp"
                (self.upload_dir / relative).write_bytes(variant.data)
                files[variant.name.value] = relative
                urls[variant.name.value] = f"{self.base_url}{UPLOADS_URL_PATH}/{relative}"
        except OSError as e:
            self._unlink_all(files.values())
            raise StorageError("Image upload failed", [f"Could not write image file: {e}"]) from e

        urls["original"] = urls[VariantName.LARGE.value]
        return StoredImage(
            product_id=product_id,
            provider=self.provider,
            original_filename=upload.filename,
            original_size=upload.size,
            mime_type=upload.content_type,
            urls=urls,
            width=processed.width,
            height=processed.height,
            format=processed.format,
            files=files,
        )

    def remove(self, image: StoredImage) -> None:
        if image.provider != StorageProvider.LOCAL:
            logger.warning(f"Skipping {image.provider} asset of product {image.product_id}")
            return
        self._unlink_all(image.files.values())

    def storage_stats(self) -> dict[str, Any]:
        directories: dict[str, Any] = {}
        total_files = 0
        total_size = 0
        for directory in VARIANT_DIRECTORIES.values():
            sizes = [path.stat().st_size for path in self._files_in(directory)]
            size = sum(sizes)
            average = round(size / len(sizes)) if sizes else 0
            directories[directory] = {
                "fileCount": len(sizes),
                "totalSize": format_size(size),
                "totalSizeBytes": size,
                "averageSize": format_size(average),
                "averageSizeBytes": average,
            }
            total_files += len(sizes)
            total_size += size
        return {
            "provider": self.provider.value,
            "totalFiles": total_files,
            "totalSize": format_size(total_size),
            "totalSizeBytes": total_size,
            "directories": directories,
        }

    def cleanup_orphans(self, active_product_ids: set[str]) -> int:
        removed = 0
        for directory in VARIANT_DIRECTORIES.values():
            for path in self._files_in(directory):
                match = PRODUCT_PREFIX.match(path.name)
                if match and match.group(1) not in active_product_ids:
                    path.unlink(missing_ok=True)
                    logger.info(f"Cleaned up orphaned image: {path.name}")
                    removed += 1
        return removed

    def _files_in(self, directory: str) -> list[Path]:
        folder = self.upload_dir / directory
        if not folder.is_dir():
            return []
        return [path for path in folder.iterdir() if path.is_file()]

    def _unlink_all(self, relative_paths) -> None:
        root = self.upload_dir.resolve()
        for relative in relative_paths:
            path = (self.upload_dir / relative).resolve()
            if not path.is_relative_to(root):
                logger.warning(f"Refusing to delete file outside uploads: {relative}")
                continue
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                raise StorageError("Image deletion failed", [f"Could not delete {relative}: {e}"]) from e

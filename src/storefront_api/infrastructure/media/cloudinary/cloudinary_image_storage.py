import re
import secrets
import time
from typing import Any

from storefront_api.core.application.ports import ImageStoragePort
from storefront_api.core.domain.media import (
    IMAGE_VARIANTS,
    ImageUpload,
    StorageProvider,
    StoredImage,
)
from storefront_api.core.domain.shared import utc_now
from storefront_api.infrastructure.media.cloudinary.cloudinary_client import CloudinaryClient
from storefront_api.infrastructure.media.local_image_storage import LocalImageStorage
from storefront_api.infrastructure.media.pillow_image_processor import PillowImageProcessor
from storefront_api.infrastructure.media.size_formatter import format_size


def _usage_value(raw: Any) -> Any:
    # newer accounts report {"usage": n, ...} where older ones report n
    return raw.get("usage") if isinstance(raw, dict) else raw


class CloudinaryImageStorage(ImageStoragePort):
    """Stores originals on Cloudinary and derives sized URLs by transformation.

    Images saved locally before the account was configured are still removed
    and cleaned up through ``local``.
    """

    def __init__(
        self,
        client: CloudinaryClient,
        local: LocalImageStorage,
        folder: str,
        processor: PillowImageProcessor | None = None,
    ):
        self.client = client
        self.local = local
        self.folder = folder.strip("/")
        self.processor = processor or PillowImageProcessor()

    @property
    def provider(self) -> StorageProvider:
        return StorageProvider.CLOUDINARY

    def store(self, upload: ImageUpload, product_id: str) -> StoredImage:
        # decode locally first so corrupt files never reach the cloud
        self.processor.process(upload.data)

        result = self.client.upload(upload.data, upload.filename, self._public_id(product_id, upload))
        secure_url = result["secure_url"]
        public_id = result["public_id"]
        delivery_base = secure_url.split("/upload/")[0] + "/upload/"

        urls = {
            spec.name.value: f"{delivery_base}{spec.cloudinary_transformation}/{public_id}"
            for spec in IMAGE_VARIANTS
        }
        urls["original"] = secure_url
        return StoredImage(
            product_id=product_id,
            provider=self.provider,
            original_filename=upload.filename,
            original_size=upload.size,
            mime_type=upload.content_type,
            urls=urls,
            width=result.get("width"),
            height=result.get("height"),
            format=result.get("format"),
            public_id=public_id,
        )

    def remove(self, image: StoredImage) -> None:
        if image.provider == StorageProvider.LOCAL:
            self.local.remove(image)
        elif image.public_id:
            self.client.destroy(image.public_id)

    def storage_stats(self) -> dict[str, Any]:
        usage = self.client.usage()
        storage = _usage_value(usage.get("storage")) or 0
        bandwidth = _usage_value(usage.get("bandwidth")) or 0
        return {
            "provider": self.provider.value,
            "totalImages": usage.get("resources"),
            "totalStorage": format_size(storage),
            "totalStorageBytes": storage,
            "bandwidth": format_size(bandwidth),
            "bandwidthBytes": bandwidth,
            "transformations": _usage_value(usage.get("transformations")),
            "plan": usage.get("plan"),
            "lastUpdated": utc_now().isoformat(),
        }

    def cleanup_orphans(self, active_product_ids: set[str]) -> int:
        return self.local.cleanup_orphans(active_product_ids)

    def _public_id(self, product_id: str, upload: ImageUpload) -> str:
        name = re.sub(r"[^a-zA-Z0-9]", "_", upload.filename).lower()
        stamp = f"{int(time.time() * 1000)}_{secrets.token_hex(4)}"
        return f"{self.folder}/products/{product_id}_{stamp}_{name}"

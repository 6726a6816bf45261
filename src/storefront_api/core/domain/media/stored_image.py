from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

from storefront_api.core.domain.shared import utc_now


class StorageProvider(StrEnum):
    LOCAL = "Local Storage"
    CLOUDINARY = "Cloudinary"


@dataclass
class StoredImage:
    """Result of persisting one upload in every size."""

    product_id: str
    provider: StorageProvider
    original_filename: str
    original_size: int
    mime_type: str
    urls: dict[str, str]
    width: int | None = None
    height: int | None = None
    format: str | None = None
    public_id: str | None = None
    files: dict[str, str] = field(default_factory=dict)
    uploaded_at: datetime = field(default_factory=utc_now)

    def to_document(self) -> dict[str, Any]:
        return {
            "provider": self.provider.value,
            "originalFilename": self.original_filename,
            "originalSize": self.original_size,
            "mimeType": self.mime_type,
            "imageUrls": dict(self.urls),
            "width": self.width,
            "height": self.height,
            "format": self.format,
            "publicId": self.public_id,
            "files": dict(self.files),
            "uploadedAt": self.uploaded_at.isoformat(),
        }

    @classmethod
    def from_document(cls, product_id: str, doc: dict[str, Any]) -> "StoredImage":
        uploaded_at = doc.get("uploadedAt")
        return cls(
            product_id=product_id,
            provider=StorageProvider(doc.get("provider", StorageProvider.LOCAL.value)),
            original_filename=doc.get("originalFilename", ""),
            original_size=doc.get("originalSize", 0),
            mime_type=doc.get("mimeType", ""),
            urls=dict(doc.get("imageUrls") or {}),
            width=doc.get("width"),
            height=doc.get("height"),
            format=doc.get("format"),
            public_id=doc.get("publicId"),
            files=dict(doc.get("files") or {}),
            uploaded_at=datetime.fromisoformat(uploaded_at) if uploaded_at else utc_now(),
        )


def images_document(images: list[StoredImage]) -> dict[str, Any]:
    """Shape stored on ``Product.images``."""
    return {
        "images": [image.to_document() for image in images],
        "uploadedAt": utc_now().isoformat(),
        "totalImages": len(images),
    }


def images_from_document(product_id: str, doc: dict[str, Any] | None) -> list[StoredImage]:
    if not doc:
        return []
    return [StoredImage.from_document(product_id, item) for item in doc.get("images") or []]

from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True)
class ImageUpload:
    """Raw uploaded file held in memory until it is processed."""

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def extension(self) -> str:
        return PurePath(self.filename).suffix.lower()

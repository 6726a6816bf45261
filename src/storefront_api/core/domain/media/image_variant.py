from dataclasses import dataclass
from enum import StrEnum


class VariantName(StrEnum):
    THUMBNAIL = "thumbnail"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class ImageVariantSpec:
    name: VariantName
    width: int
    height: int
    crop: bool

    @property
    def cloudinary_transformation(self) -> str:
        mode = "c_fill" if self.crop else "c_limit"
        return f"{mode},w_{self.width},h_{self.height},q_auto"


# thumbnail is cropped to cover; the others fit inside without enlargement
IMAGE_VARIANTS: tuple[ImageVariantSpec, ...] = (
    ImageVariantSpec(VariantName.THUMBNAIL, 150, 150, crop=True),
    ImageVariantSpec(VariantName.MEDIUM, 500, 500, crop=False),
    ImageVariantSpec(VariantName.LARGE, 1200, 1200, crop=False),
)

import io
from dataclasses import dataclass

from PIL import Image, ImageOps, UnidentifiedImageError

from storefront_api.core.application.exceptions import ImageProcessingError
from storefront_api.core.domain.media import IMAGE_VARIANTS, ImageVariantSpec, VariantName

MAX_DIMENSION = 5000
WEBP_QUALITY = 80


@dataclass(frozen=True)
class RenderedVariant:
    name: VariantName
    width: int
    height: int
    data: bytes


@dataclass(frozen=True)
class ProcessedImage:
    width: int
    height: int
    format: str
    variants: list[RenderedVariant]


class PillowImageProcessor:
    """Decodes an upload and renders every configured size as WebP."""

    def __init__(self, variants: tuple[ImageVariantSpec, ...] = IMAGE_VARIANTS):
        self.variants = variants

    def process(self, data: bytes) -> ProcessedImage:
        original = self._open(data)
        source_format = (original.format or "unknown").lower()

        image = self._normalize_mode(ImageOps.exif_transpose(original))
        return ProcessedImage(
            width=original.width,
            height=original.height,
            format=source_format,
            variants=[self._render(image, spec) for spec in self.variants],
        )

    @staticmethod
    def _open(data: bytes) -> Image.Image:
        # the header is checked before any pixel data is decoded
        try:
            image = Image.open(io.BytesIO(data))
        except Image.DecompressionBombError as e:
            raise _too_large() from e
        except (UnidentifiedImageError, OSError) as e:
            raise _unreadable() from e

        if image.width > MAX_DIMENSION or image.height > MAX_DIMENSION:
            raise _too_large()
        try:
            image.load()
        except (Image.DecompressionBombError, OSError) as e:
            raise _unreadable() from e
        return image

    @staticmethod
    def _normalize_mode(image: Image.Image) -> Image.Image:
        if image.mode in ("RGB", "RGBA"):
            return image
        has_alpha = "A" in image.getbands() or "transparency" in image.info
        return image.convert("RGBA" if has_alpha else "RGB")

    @staticmethod
    def _render(image: Image.Image, spec: ImageVariantSpec) -> RenderedVariant:
        size = (spec.width, spec.height)
        if spec.crop:
            resized = ImageOps.fit(image, size, Image.Resampling.LANCZOS, centering=(0.5, 0.5))
        else:
            resized = image.copy()
            # thumbnail() only ever shrinks
            resized.thumbnail(size, Image.Resampling.LANCZOS)

        output = io.BytesIO()
        resized.save(output, "WEBP", quality=WEBP_QUALITY)
        return RenderedVariant(
            name=spec.name, width=resized.width, height=resized.height, data=output.getvalue()
        )


def _too_large() -> ImageProcessingError:
    return ImageProcessingError(
        "Image processing failed",
        [f"Image dimensions too large. Maximum: {MAX_DIMENSION}x{MAX_DIMENSION} pixels"],
    )


def _unreadable() -> ImageProcessingError:
    return ImageProcessingError(
        "Image processing failed", ["Invalid image: Unable to read image dimensions"]
    )

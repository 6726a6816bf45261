import io

import pytest
from PIL import Image, ImageFile

from storefront_api.core.application.exceptions import ImageProcessingError
from storefront_api.core.domain.media import VariantName
from storefront_api.infrastructure.media.pillow_image_processor import PillowImageProcessor


@pytest.fixture
def processor():
    return PillowImageProcessor()


def test_renders_every_variant_as_webp(processor, image_bytes):
    processed = processor.process(image_bytes("JPEG", (1600, 800)))

    assert (processed.width, processed.height, processed.format) == (1600, 800, "jpeg")
    sizes = {v.name: (v.width, v.height) for v in processed.variants}
    assert sizes == {
        VariantName.THUMBNAIL: (150, 150),
        VariantName.MEDIUM: (500, 250),
        VariantName.LARGE: (1200, 600),
    }
    for variant in processed.variants:
        assert Image.open(io.BytesIO(variant.data)).format == "WEBP"


def test_small_images_are_not_enlarged(processor, image_bytes):
    processed = processor.process(image_bytes("PNG", (100, 80)))
    sizes = {v.name: (v.width, v.height) for v in processed.variants}
    assert sizes[VariantName.LARGE] == (100, 80)
    assert sizes[VariantName.THUMBNAIL] == (150, 150)


def test_transparent_png_keeps_alpha(processor):
    output = io.BytesIO()
    Image.new("LA", (50, 50)).save(output, "PNG")

    processed = processor.process(output.getvalue())

    thumb = next(v for v in processed.variants if v.name == VariantName.THUMBNAIL)
    assert Image.open(io.BytesIO(thumb.data)).mode == "RGBA"


def test_rejects_non_images(processor):
    with pytest.raises(ImageProcessingError) as exc:
        processor.process(b"definitely not an image")
    assert exc.value.errors == ["Invalid image: Unable to read image dimensions"]


def test_rejects_oversized_dimensions(processor, image_bytes):
    with pytest.raises(ImageProcessingError) as exc:
        processor.process(image_bytes("PNG", (5001, 10)))
    assert "Maximum: 5000x5000 pixels" in exc.value.errors[0]


def test_oversized_dimensions_are_rejected_before_decoding(processor, image_bytes, monkeypatch):
    data = image_bytes("PNG", (5001, 10))

    def fail_load(self):
        raise AssertionError("pixel data decoded")

    monkeypatch.setattr(ImageFile.ImageFile, "load", fail_load)

    with pytest.raises(ImageProcessingError) as exc:
        processor.process(data)
    assert "Maximum: 5000x5000 pixels" in exc.value.errors[0]


def test_decompression_bomb_reports_dimensions(processor, image_bytes, monkeypatch):
    data = image_bytes("PNG", (4000, 10))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

    with pytest.raises(ImageProcessingError) as exc:
        processor.process(data)
    assert exc.value.errors == ["Image dimensions too large. Maximum: 5000x5000 pixels"]

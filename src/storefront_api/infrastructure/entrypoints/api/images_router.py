from fastapi import APIRouter, Depends, File, UploadFile

from storefront_api.core.application.validation import ALLOWED_EXTENSIONS, ALLOWED_MIME_TYPES
from storefront_api.core.domain.identity import AuthClaims
from storefront_api.core.domain.media import IMAGE_VARIANTS, ImageUpload, StorageProvider
from storefront_api.infrastructure.entrypoints.api.dependencies import (
    admin_rate_limit,
    get_container,
    get_current_user,
    require_admin,
)
from storefront_api.infrastructure.entrypoints.api.envelope import success_response
from storefront_api.infrastructure.entrypoints.api.mappers import ResponseMapper
from storefront_api.infrastructure.resolution import Container

router = APIRouter(prefix="/images", tags=["images"])

admin_only = [Depends(require_admin), Depends(admin_rate_limit)]


def read_upload(file: UploadFile, max_size: int) -> ImageUpload:
    # one byte past the limit is enough to reject the file
    data = file.file.read(max_size + 1)
    return ImageUpload(
        filename=file.filename or "",
        content_type=file.content_type or "application/octet-stream",
        data=data,
    )


@router.get("/upload/config")
def upload_config(
    _user: AuthClaims = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    cloud = container.image_storage.provider == StorageProvider.CLOUDINARY
    return success_response(
        "Upload configuration retrieved successfully",
        {
            "maxFileSize": container.upload_policy.max_file_size,
            "maxFiles": container.upload_policy.max_files,
            "allowedMimeTypes": list(ALLOWED_MIME_TYPES),
            "allowedExtensions": list(ALLOWED_EXTENSIONS),
            "generatedSizes": [spec.name.value for spec in IMAGE_VARIANTS] + ["original"],
            "outputFormat": "auto-optimized" if cloud else "webp",
            "storageProvider": container.image_storage.provider.value,
            "features": {
                "cloudDelivery": cloud,
                "autoOptimization": cloud,
                "cdnDelivery": cloud,
                "dynamicTransformations": cloud,
            },
            "sizeConfigurations": {
                spec.name.value: {
                    "width": spec.width,
                    "height": spec.height,
                    "crop": "fill" if spec.crop else "limit",
                }
                for spec in IMAGE_VARIANTS
            },
            "uploadEndpoints": {
                "singleImage": "POST /images/products/{id}/image",
                "multipleImages": "POST /images/products/{id}/images",
                "deleteImages": "DELETE /images/products/{id}/image",
            },
        },
    )


@router.post("/products/{product_id}/image", dependencies=admin_only)
def upload_product_image(
    product_id: str,
    image: UploadFile | None = File(None),
    container: Container = Depends(get_container),
):
    uploads = [read_upload(image, container.upload_policy.max_file_size)] if image else []
    outcome = container.upload_product_images().execute(product_id, uploads, single=True)
    container.cache.invalidate_products([product_id])

    stored = outcome.images[0]
    return success_response(
        "Product image uploaded successfully",
        {
            "productId": product_id,
            "images": stored.urls,
            "uploadInfo": {
                "originalFilename": stored.original_filename,
                "originalSize": stored.original_size,
                "uploadedAt": stored.uploaded_at,
                "publicId": stored.public_id,
                "storageProvider": stored.provider.value,
            },
        },
    )


@router.post("/products/{product_id}/images", dependencies=admin_only)
def upload_product_images(
    product_id: str,
    images: list[UploadFile] | None = File(None),
    container: Container = Depends(get_container),
):
    max_size = container.upload_policy.max_file_size
    uploads = [read_upload(file, max_size) for file in images or []]
    outcome = container.upload_product_images().execute(product_id, uploads)
    container.cache.invalidate_products([product_id])

    body = {
        "productId": product_id,
        "imagesUploaded": len(outcome.images),
        "totalFiles": outcome.total_files,
        "images": [ResponseMapper.stored_image(image) for image in outcome.images],
    }
    if outcome.errors:
        body["errors"] = outcome.errors
    return success_response(f"{len(outcome.images)} product images uploaded successfully", body)


@router.delete("/products/{product_id}/image", dependencies=admin_only)
def delete_product_image(product_id: str, container: Container = Depends(get_container)):
    deleted_at = container.delete_product_images().execute(product_id)
    container.cache.invalidate_products([product_id])
    return success_response(
        "Product images deleted successfully",
        {"productId": product_id, "deletedAt": deleted_at},
    )


@router.get("/admin/storage/stats", dependencies=admin_only)
def storage_stats(container: Container = Depends(get_container)):
    stats = container.storage_maintenance().stats()
    return success_response(
        f"{container.image_storage.provider.value} storage statistics retrieved successfully",
        stats,
    )


@router.post("/admin/storage/cleanup", dependencies=admin_only)
def cleanup_storage(container: Container = Depends(get_container)):
    report = container.storage_maintenance().cleanup()
    return success_response("Orphaned images cleaned up successfully", report)

from typing import Any

from storefront_api.core.domain.catalog import Product
from storefront_api.core.domain.identity import User
from storefront_api.core.domain.media import StoredImage
from storefront_api.core.domain.ordering import Order, OrderLine


class ResponseMapper:
    """Turns domain objects into the camelCase payloads clients consume."""

    @staticmethod
    def registered_user(user: User) -> dict[str, Any]:
        return {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "createdAt": user.created_at,
        }

    @staticmethod
    def user_profile(user: User) -> dict[str, Any]:
        return {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "role": user.role.value,
        }

    @staticmethod
    def product(product: Product) -> dict[str, Any]:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": product.price,
            "stock": product.stock,
            "category": product.category,
            "userId": product.user_id,
            "images": product.images,
            "createdAt": product.created_at,
            "updatedAt": product.updated_at,
        }

    @staticmethod
    def order_line(line: OrderLine) -> dict[str, Any]:
        return {
            "productId": line.product_id,
            "name": line.name,
            "description": line.description,
            "quantity": line.quantity,
            "price": line.price,
            "itemTotal": line.item_total,
        }

    @classmethod
    def placed_order(cls, order: Order) -> dict[str, Any]:
        return {
            "order_id": order.id,
            "status": order.status.value,
            "total_price": order.total_price,
            "userId": order.user_id,
            "createdAt": order.created_at,
            "products": [cls.order_line(line) for line in order.lines],
        }

    @classmethod
    def order(cls, order: Order) -> dict[str, Any]:
        return {
            "order_id": order.id,
            "userId": order.user_id,
            "description": order.description,
            "total_price": order.total_price,
            "status": order.status.value,
            "createdAt": order.created_at,
            "products": [cls.order_line(line) for line in order.lines],
        }

    @staticmethod
    def stored_image(image: StoredImage) -> dict[str, Any]:
        return {
            "originalFilename": image.original_filename,
            "imageUrls": image.urls,
            "publicId": image.public_id,
            "metadata": {
                "originalWidth": image.width,
                "originalHeight": image.height,
                "format": image.format,
                "uploadedAt": image.uploaded_at,
            },
        }

"""Conversions between domain objects and stored documents.

Documents use the camelCase field names of the public API and are keyed by
the application ``id``; Mongo's own ``_id`` is always projected away.
"""

from typing import Any

from storefront_api.core.domain.catalog import Product
from storefront_api.core.domain.identity import User, UserRole
from storefront_api.core.domain.ordering import Order, OrderLine, OrderStatus

NO_MONGO_ID = {"_id": False}

PRODUCT_FIELDS = {
    "name": "name",
    "description": "description",
    "price": "price",
    "stock": "stock",
    "category": "category",
    "user_id": "userId",
    "images": "images",
    "created_at": "createdAt",
    "updated_at": "updatedAt",
}


def user_to_document(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "password": user.password_hash,
        "role": user.role.value,
        "favorites": list(user.favorites),
        "createdAt": user.created_at,
        "updatedAt": user.updated_at,
    }


def user_from_document(doc: dict[str, Any]) -> User:
    return User(
        id=doc["id"],
        username=doc["username"],
        email=doc["email"],
        password_hash=doc["password"],
        role=UserRole(doc.get("role", UserRole.USER.value)),
        favorites=list(doc.get("favorites") or []),
        created_at=doc["createdAt"],
        updated_at=doc.get("updatedAt"),
    )


def product_to_document(product: Product) -> dict[str, Any]:
    return {"id": product.id} | {
        stored: getattr(product, attr) for attr, stored in PRODUCT_FIELDS.items()
    }


def product_from_document(doc: dict[str, Any]) -> Product:
    return Product(
        id=doc["id"],
        **{attr: doc.get(stored) for attr, stored in PRODUCT_FIELDS.items()},
    )


def product_changes_to_document(changes: dict[str, Any]) -> dict[str, Any]:
    unknown = set(changes) - set(PRODUCT_FIELDS)
    if unknown:
        raise ValueError(f"Unknown product fields: {sorted(unknown)}")
    return {PRODUCT_FIELDS[attr]: value for attr, value in changes.items()}


def order_line_to_document(line: OrderLine) -> dict[str, Any]:
    return {
        "productId": line.product_id,
        "name": line.name,
        "description": line.description,
        "quantity": line.quantity,
        "price": line.price,
        "itemTotal": line.item_total,
    }


def order_to_document(order: Order) -> dict[str, Any]:
    return {
        "id": order.id,
        "userId": order.user_id,
        "description": order.description,
        "totalPrice": order.total_price,
        "status": order.status.value,
        "products": [order_line_to_document(line) for line in order.lines],
        "createdAt": order.created_at,
    }


def order_from_document(doc: dict[str, Any]) -> Order:
    return Order(
        id=doc["id"],
        user_id=doc["userId"],
        description=doc.get("description", ""),
        total_price=doc.get("totalPrice", 0.0),
        status=OrderStatus(doc.get("status", OrderStatus.PENDING.value)),
        lines=[
            OrderLine(
                product_id=line["productId"],
                name=line["name"],
                description=line.get("description", ""),
                quantity=line["quantity"],
                price=line["price"],
            )
            for line in doc.get("products") or []
        ],
        created_at=doc["createdAt"],
    )

"""Field rules shared by the auth, catalog and ordering use cases.

Each validator returns the list of human readable problems instead of
raising, so a request reports every failing rule at once.
"""

import math
import re
from typing import Any

from storefront_api.core.domain.ordering import OrderItemRequest

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")
PASSWORD_SPECIALS = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")

PRODUCT_FIELDS = ("name", "description", "price", "stock", "category")


def validate_email(email: Any) -> bool:
    return isinstance(email, str) and bool(EMAIL_PATTERN.match(email))


def validate_password(password: Any) -> list[str]:
    text = password if isinstance(password, str) else ""
    errors = []
    if len(text) < 8:
        errors.append("Password must be at least 8 characters long")
    if not re.search(r"[A-Z]", text):
        errors.append("Password must include at least one uppercase letter (A-Z)")
    if not re.search(r"[a-z]", text):
        errors.append("Password must include at least one lowercase letter (a-z)")
    if not re.search(r"[0-9]", text):
        errors.append("Password must include at least one number (0-9)")
    if not PASSWORD_SPECIALS.search(text):
        errors.append("Password must include at least one special character (e.g., !@#$%^&*)")
    return errors


def validate_username(username: Any) -> list[str]:
    if not isinstance(username, str) or not username.strip():
        return ["Username is required"]
    if not USERNAME_PATTERN.match(username):
        return ["Username must be alphanumeric (letters and numbers only, no special characters or spaces)"]
    return []


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_product(data: dict[str, Any], *, partial: bool = False) -> list[str]:
    """Checks product fields. With ``partial`` only the keys present are checked."""
    errors = []

    def checked(field: str) -> bool:
        return not partial or field in data

    if checked("name") and _is_blank(data.get("name")):
        errors.append("Product name is required")
    if checked("description") and _is_blank(data.get("description")):
        errors.append("Product description is required")
    if checked("price"):
        price = _as_number(data.get("price"))
        if price is None or price <= 0:
            errors.append("Product price must be a positive number")
    if checked("stock"):
        stock = _as_int(data.get("stock"))
        if stock is None or stock < 0:
            errors.append("Product stock must be a non-negative integer")
    if checked("category") and _is_blank(data.get("category")):
        errors.append("Product category is required")
    return errors


def normalize_product(data: dict[str, Any]) -> dict[str, Any]:
    """Coerces validated product fields into their stored types."""
    normalized: dict[str, Any] = {}
    for field in PRODUCT_FIELDS:
        if field not in data:
            continue
        value = data[field]
        if field == "price":
            normalized[field] = _as_number(value)
        elif field == "stock":
            normalized[field] = _as_int(value)
        else:
            normalized[field] = value.strip()
    return normalized


def parse_order_items(raw: Any) -> tuple[list[OrderItemRequest], list[str]]:
    """Turns the order request body into item requests plus per-item errors."""
    if not isinstance(raw, list) or not raw:
        return [], ["Order must contain an array of products with productId and quantity"]

    items: list[OrderItemRequest] = []
    errors: list[str] = []
    for index, entry in enumerate(raw, start=1):
        entry = entry if isinstance(entry, dict) else {}
        product_id = entry.get("productId")
        quantity = entry.get("quantity")
        item_errors = []
        if _is_blank(product_id):
            item_errors.append(f"Item {index}: productId is required and must be a valid string")
        count = _as_int(quantity)
        if count is None or count <= 0:
            item_errors.append(f"Item {index}: quantity must be a positive integer")
        if item_errors:
            errors.extend(item_errors)
            continue
        items.append(OrderItemRequest(product_id=product_id.strip(), quantity=count))
    return items, errors

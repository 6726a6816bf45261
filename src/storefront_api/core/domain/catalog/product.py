from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from storefront_api.core.domain.shared import new_id, utc_now


@dataclass
class Product:
    name: str
    description: str
    price: float
    stock: int
    category: str
    user_id: str | None = None
    images: dict[str, Any] | None = None
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock >= quantity

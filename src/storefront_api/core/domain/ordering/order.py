from dataclasses import dataclass, field
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from storefront_api.core.domain.ordering.order_status import OrderStatus
from storefront_api.core.domain.shared import new_id, utc_now


def round_price(value: float) -> float:
    """Half-up rounding to cents, matching what customers see on receipts."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class OrderLine:
    """Snapshot of a product at the moment it was ordered."""

    product_id: str
    name: str
    description: str
    quantity: int
    price: float

    @property
    def item_total(self) -> float:
        return round_price(self.price * self.quantity)


@dataclass
class Order:
    user_id: str
    lines: list[OrderLine]
    description: str = ""
    status: OrderStatus = OrderStatus.PENDING
    total_price: float = 0.0
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def place(cls, user_id: str, lines: list[OrderLine]) -> "Order":
        count = len(lines)
        total = sum(line.price * line.quantity for line in lines)
        return cls(
            user_id=user_id,
            lines=list(lines),
            description=f"Order with {count} product{'s' if count > 1 else ''}",
            total_price=round_price(total),
        )

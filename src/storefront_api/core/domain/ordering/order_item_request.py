from dataclasses import dataclass


@dataclass(frozen=True)
class OrderItemRequest:
    product_id: str
    quantity: int

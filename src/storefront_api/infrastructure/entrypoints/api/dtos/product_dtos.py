from typing import Any

from pydantic import BaseModel, ConfigDict


class ProductPayloadDTO(BaseModel):
    """Create and update body. Unset fields are left out of partial updates."""

    model_config = ConfigDict(extra="ignore")

    name: Any = None
    description: Any = None
    price: Any = None
    stock: Any = None
    category: Any = None

    def provided_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)

from dataclasses import dataclass
from enum import StrEnum

from storefront_api.core.domain.catalog.product import Product


class ProductSort(StrEnum):
    NEWEST = "newest"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"

    @classmethod
    def parse(cls, raw: str | None) -> "ProductSort":
        """Unknown or empty values fall back to newest first."""
        try:
            return cls((raw or "").strip().lower())
        except ValueError:
            return cls.NEWEST


@dataclass(frozen=True)
class ProductQuery:
    page: int = 1
    page_size: int = 10
    search: str = ""
    category: str = ""
    sort: ProductSort = ProductSort.NEWEST

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class ProductPage:
    items: list[Product]
    page: int
    page_size: int
    total_size: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return -(-self.total_size // self.page_size)

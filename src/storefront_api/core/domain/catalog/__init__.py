from storefront_api.core.domain.catalog.product import Product
from storefront_api.core.domain.catalog.product_query import ProductPage, ProductQuery, ProductSort

__all__ = ["Product", "ProductPage", "ProductQuery", "ProductSort"]

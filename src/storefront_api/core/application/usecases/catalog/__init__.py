from storefront_api.core.application.usecases.catalog.create_product_usecase import CreateProductUseCase
from storefront_api.core.application.usecases.catalog.delete_product_usecase import DeleteProductUseCase
from storefront_api.core.application.usecases.catalog.get_product_usecase import GetProductUseCase
from storefront_api.core.application.usecases.catalog.list_products_usecase import ListProductsUseCase
from storefront_api.core.application.usecases.catalog.seed_catalog_usecase import SeedCatalogUseCase, SeedReport
from storefront_api.core.application.usecases.catalog.update_product_usecase import UpdateProductUseCase

__all__ = [
    "CreateProductUseCase",
    "DeleteProductUseCase",
    "GetProductUseCase",
    "ListProductsUseCase",
    "SeedCatalogUseCase",
    "SeedReport",
    "UpdateProductUseCase",
]

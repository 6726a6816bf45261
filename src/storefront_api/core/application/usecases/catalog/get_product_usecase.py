from storefront_api.core.application.exceptions import NotFoundError
from storefront_api.core.application.ports import ProductRepositoryPort
from storefront_api.core.domain.catalog import Product


class GetProductUseCase:
    def __init__(self, products: ProductRepositoryPort):
        self.products = products

    def execute(self, product_id: str) -> Product:
        product = self.products.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found", ["Product does not exist"])
        return product

from storefront_api.core.application.ports import ProductRepositoryPort
from storefront_api.core.domain.catalog import ProductPage, ProductQuery

MAX_PAGE_SIZE = 100
# keeps the offset inside a signed 64-bit skip
MAX_PAGE = 1_000_000


class ListProductsUseCase:
    def __init__(self, products: ProductRepositoryPort):
        self.products = products

    def execute(self, query: ProductQuery) -> ProductPage:
        if query.page_size > MAX_PAGE_SIZE or query.page > MAX_PAGE:
            query = ProductQuery(
                page=min(query.page, MAX_PAGE),
                page_size=min(query.page_size, MAX_PAGE_SIZE),
                search=query.search,
                category=query.category,
                sort=query.sort,
            )
        return self.products.search(query)

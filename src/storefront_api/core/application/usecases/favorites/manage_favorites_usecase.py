from storefront_api.core.application.exceptions import NotFoundError, ValidationError
from storefront_api.core.application.ports import ProductRepositoryPort, UserRepositoryPort
from storefront_api.core.domain.catalog import Product


class ManageFavoritesUseCase:
    def __init__(self, users: UserRepositoryPort, products: ProductRepositoryPort):
        self.users = users
        self.products = products

    def add(self, user_id: str, product_id: str) -> str:
        if self.products.find_by_id(product_id) is None:
            raise NotFoundError("Product not found", ["Product does not exist"])
        if not self.users.add_favorite(user_id, product_id):
            raise ValidationError(
                "Failed to add to favorites", ["Product may already be in favorites"]
            )
        return product_id

    def remove(self, user_id: str, product_id: str) -> str:
        if not self.users.remove_favorite(user_id, product_id):
            raise ValidationError(
                "Failed to remove from favorites", ["Product may not be in favorites"]
            )
        return product_id

    def list(self, user_id: str) -> list[Product]:
        favorites = []
        for product_id in self.users.list_favorites(user_id):
            product = self.products.find_by_id(product_id)
            # deleted products linger in the id list until removed
            if product is not None:
                favorites.append(product)
        return favorites

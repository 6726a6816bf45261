from storefront_api.core.application.usecases.favorites.manage_favorites_usecase import ManageFavoritesUseCase

__all__ = ["ManageFavoritesUseCase"]

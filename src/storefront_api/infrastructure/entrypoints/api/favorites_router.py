from fastapi import APIRouter, Depends

from storefront_api.core.domain.identity import AuthClaims
from storefront_api.infrastructure.entrypoints.api.dependencies import (
    get_container,
    get_current_user,
)
from storefront_api.infrastructure.entrypoints.api.envelope import success_response
from storefront_api.infrastructure.entrypoints.api.mappers import ResponseMapper
from storefront_api.infrastructure.resolution import Container

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.post("/{product_id}")
def add_favorite(
    product_id: str,
    user: AuthClaims = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    container.favorites().add(user.user_id, product_id)
    return success_response("Product added to favorites", {"productId": product_id})


@router.delete("/{product_id}")
def remove_favorite(
    product_id: str,
    user: AuthClaims = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    container.favorites().remove(user.user_id, product_id)
    return success_response("Product removed from favorites", {"productId": product_id})


@router.get("")
def list_favorites(
    user: AuthClaims = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    products = container.favorites().list(user.user_id)
    if not products:
        return success_response("No favorite products found", [])
    return success_response(
        "Favorite products retrieved successfully",
        [ResponseMapper.product(product) for product in products],
    )

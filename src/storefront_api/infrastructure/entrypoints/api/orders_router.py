from typing import Any

from fastapi import APIRouter, Body, Depends, status

from storefront_api.core.domain.identity import AuthClaims
from storefront_api.infrastructure.entrypoints.api.dependencies import (
    get_container,
    get_current_user,
    order_rate_limit,
)
from storefront_api.infrastructure.entrypoints.api.envelope import success_response
from storefront_api.infrastructure.entrypoints.api.mappers import ResponseMapper
from storefront_api.infrastructure.resolution import Container

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", dependencies=[Depends(order_rate_limit)])
def place_order(
    items: Any = Body(None),
    user: AuthClaims = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    order = container.place_order().execute(user.user_id, items)
    # stock changed for every ordered product
    container.cache.invalidate_products({line.product_id for line in order.lines})
    return success_response(
        "Order placed successfully",
        ResponseMapper.placed_order(order),
        status_code=status.HTTP_201_CREATED,
    )


@router.get("")
def list_orders(
    user: AuthClaims = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    orders = container.list_user_orders().execute(user.user_id)
    return success_response(
        "Orders retrieved successfully", [ResponseMapper.order(order) for order in orders]
    )

from fastapi import APIRouter, Depends, Query, status

from storefront_api.core.application.usecases.catalog.list_products_usecase import MAX_PAGE
from storefront_api.core.domain.catalog import ProductQuery, ProductSort
from storefront_api.core.domain.identity import AuthClaims
from storefront_api.infrastructure.cache.cache_keys import (
    PRODUCT_LIST_TAG,
    PRODUCTS_TAG,
    product_detail_key,
    product_list_key,
    product_tag,
)
from storefront_api.infrastructure.entrypoints.api.dependencies import (
    admin_rate_limit,
    get_container,
    require_admin,
    search_rate_limit,
)
from storefront_api.infrastructure.entrypoints.api.dtos import ProductPayloadDTO
from storefront_api.infrastructure.entrypoints.api.envelope import (
    paginated_response,
    success_response,
)
from storefront_api.infrastructure.entrypoints.api.mappers import ResponseMapper
from storefront_api.infrastructure.entrypoints.api.response_caching import cached_response
from storefront_api.infrastructure.resolution import Container

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

router = APIRouter(prefix="/products", tags=["products"])


def positive_int(raw: str | None, default: int) -> int:
    """Non-numeric and non-positive values fall back to ``default``."""
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


@router.get("", dependencies=[Depends(search_rate_limit)])
def list_products(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    page_size: str | None = Query(None, alias="pageSize"),
    search: str = Query(""),
    category: str = Query(""),
    sort: str | None = Query(None),
    container: Container = Depends(get_container),
):
    query = ProductQuery(
        page=min(positive_int(page, DEFAULT_PAGE), MAX_PAGE),
        page_size=positive_int(limit if limit is not None else page_size, DEFAULT_PAGE_SIZE),
        search=search.strip(),
        category=category.strip(),
        sort=ProductSort.parse(sort),
    )
    usecase = container.list_products()

    def produce():
        result = usecase.execute(query)
        return paginated_response(
            "Products retrieved successfully",
            [ResponseMapper.product(product) for product in result.items],
            result.page,
            result.page_size,
            result.total_size,
            result.total_pages,
        )

    ttl = (
        container.settings.cache_search_ttl
        if query.search
        else container.settings.cache_product_list_ttl
    )
    return cached_response(
        container.cache, product_list_key(query), ttl, [PRODUCTS_TAG, PRODUCT_LIST_TAG], produce
    )


@router.get("/{product_id}")
def get_product(product_id: str, container: Container = Depends(get_container)):
    usecase = container.get_product()

    def produce():
        product = usecase.execute(product_id)
        return success_response("Product retrieved successfully", ResponseMapper.product(product))

    return cached_response(
        container.cache,
        product_detail_key(product_id),
        container.settings.cache_product_detail_ttl,
        [PRODUCTS_TAG, product_tag(product_id)],
        produce,
    )


@router.post("", dependencies=[Depends(admin_rate_limit)])
def create_product(
    payload: ProductPayloadDTO | None = None,
    admin: AuthClaims = Depends(require_admin),
    container: Container = Depends(get_container),
):
    fields = payload.provided_fields() if payload else {}
    product = container.create_product().execute(fields, admin.user_id)
    container.cache.invalidate_products([product.id])
    return success_response(
        "Product created successfully",
        ResponseMapper.product(product),
        status_code=status.HTTP_201_CREATED,
    )


@router.put("/{product_id}", dependencies=[Depends(admin_rate_limit)])
def update_product(
    product_id: str,
    payload: ProductPayloadDTO | None = None,
    _admin: AuthClaims = Depends(require_admin),
    container: Container = Depends(get_container),
):
    fields = payload.provided_fields() if payload else {}
    product = container.update_product().execute(product_id, fields)
    container.cache.invalidate_products([product_id])
    return success_response("Product updated successfully", ResponseMapper.product(product))


@router.delete("/{product_id}", dependencies=[Depends(admin_rate_limit)])
def delete_product(
    product_id: str,
    _admin: AuthClaims = Depends(require_admin),
    container: Container = Depends(get_container),
):
    container.delete_product().execute(product_id)
    container.cache.invalidate_products([product_id])
    return success_response("Product deleted successfully")

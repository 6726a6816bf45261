from urllib.parse import quote

from storefront_api.core.domain.catalog import ProductQuery, ProductSort

PRODUCT_LIST_PREFIX = "products:list"
PRODUCT_DETAIL_PREFIX = "products:detail"

PRODUCTS_TAG = "products"
PRODUCT_LIST_TAG = "products:list"


def product_tag(product_id: str) -> str:
    return f"product:{product_id}"


def product_list_key(query: ProductQuery) -> str:
    # free-text values are percent-encoded so they cannot forge a separator
    key = f"{PRODUCT_LIST_PREFIX}:page:{query.page}:size:{query.page_size}"
    if query.search:
        key += f":search:{quote(query.search, safe='')}"
    if query.category:
        key += f":category:{quote(query.category, safe='')}"
    if query.sort != ProductSort.NEWEST:
        key += f":sort:{query.sort.value}"
    return key


def product_detail_key(product_id: str) -> str:
    return f"{PRODUCT_DETAIL_PREFIX}:{product_id}"

from storefront_api.infrastructure.entrypoints.api.mappers.response_mapper import ResponseMapper

__all__ = ["ResponseMapper"]

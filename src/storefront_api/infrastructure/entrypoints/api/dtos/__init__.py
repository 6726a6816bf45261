from storefront_api.infrastructure.entrypoints.api.dtos.auth_dtos import LoginRequestDTO, RegisterRequestDTO
from storefront_api.infrastructure.entrypoints.api.dtos.product_dtos import ProductPayloadDTO

__all__ = ["LoginRequestDTO", "ProductPayloadDTO", "RegisterRequestDTO"]

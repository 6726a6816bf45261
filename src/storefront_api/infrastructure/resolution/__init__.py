from storefront_api.infrastructure.resolution.container import Container, build_container

__all__ = ["Container", "build_container"]

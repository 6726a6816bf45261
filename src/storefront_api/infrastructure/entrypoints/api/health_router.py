from fastapi import APIRouter, Depends

from storefront_api.infrastructure.entrypoints.api.dependencies import get_container
from storefront_api.infrastructure.resolution import Container

router = APIRouter()


@router.get("/health")
def health_check(container: Container = Depends(get_container)):
    return {
        "status": "OK",
        "message": "E-commerce API is running",
        "service": container.settings.app_name,
        "version": container.settings.app_version,
        "database": "up" if container.persistence.is_healthy() else "down",
    }

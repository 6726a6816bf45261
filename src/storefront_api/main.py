import uvicorn

from storefront_api.infrastructure.configuration.main_settings import get_settings
from storefront_api.infrastructure.entrypoints.api.app_factory import create_app
from storefront_api.infrastructure.observability.logger_factory_service import configure_logging


def dev():
    """Run the development server with reload."""
    settings = get_settings()
    uvicorn.run(
        "storefront_api.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=True,
    )


configure_logging()

# Instantiate global app for ASGI
app = create_app(get_settings())

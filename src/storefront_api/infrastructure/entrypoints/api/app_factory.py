from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront_api.core.application.exceptions import (
    ApplicationError,
    RateLimitExceededError,
)
from storefront_api.infrastructure.configuration.main_settings import Settings
from storefront_api.infrastructure.entrypoints.api.auth_router import router as auth_router
from storefront_api.infrastructure.entrypoints.api.cache_router import router as cache_router
from storefront_api.infrastructure.entrypoints.api.dependencies import general_rate_limit
from storefront_api.infrastructure.entrypoints.api.envelope import error_response
from storefront_api.infrastructure.entrypoints.api.favorites_router import (
    router as favorites_router,
)
from storefront_api.infrastructure.entrypoints.api.health_router import (
    router as health_router,
)
from storefront_api.infrastructure.entrypoints.api.images_router import router as images_router
from storefront_api.infrastructure.entrypoints.api.orders_router import router as orders_router
from storefront_api.infrastructure.entrypoints.api.products_router import (
    router as products_router,
)
from storefront_api.infrastructure.entrypoints.api.rate_limit_headers_middleware import (
    RateLimitHeadersMiddleware,
)
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)
from storefront_api.infrastructure.observability.logging import CorrelationMiddleware
from storefront_api.infrastructure.rate_limiting import RateLimitDecision
from storefront_api.infrastructure.resolution import build_container

logger = LoggerFactoryService.build_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
INTERNAL_ERROR_DETAIL = "An unexpected error occurred"


def _readable_errors(exc: RequestValidationError) -> list[str]:
    readable = []
    for error in exc.errors():
        # drop the "body"/"query" prefix pydantic puts in front of the field path
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        message = error.get("msg", "Invalid value")
        readable.append(f"{location}: {message}" if location else message)
    return readable


def create_app(settings: Settings) -> FastAPI:
    logger.info("--- BOOT DIAGNOSTICS ---")
    logger.info(f"App Name: {settings.app_name} v{settings.app_version}")
    logger.info(f"Env: {settings.app_env.value}")
    logger.info(f"Storage backend: {settings.storage_backend.value}")
    logger.info(f"Cloudinary configured: {settings.cloudinary_configured}")
    logger.info(f"Cache enabled: {settings.cache_enabled}, rate limit enabled: {settings.rate_limit_enabled}")
    logger.info("------------------------")

    container = build_container(settings)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        container.persistence.connect()
        logger.info(f"{settings.app_name} started on port {settings.port}")
        try:
            yield
        finally:
            container.persistence.close()
            logger.info(f"{settings.app_name} stopped")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        dependencies=[Depends(general_rate_limit)],
    )
    app.state.container = container

    # last added runs first: correlation wraps everything, CORS answers preflights
    app.add_middleware(RateLimitHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["RateLimit-Limit", "RateLimit-Remaining", "RateLimit-Reset", "X-Cache"],
    )
    app.add_middleware(CorrelationMiddleware)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        headers = None
        if isinstance(exc, RateLimitExceededError):
            headers = RateLimitDecision(False, exc.limit, 0, exc.reset_after).headers()
            headers["Retry-After"] = str(exc.reset_after)
            logger.warning(f"Rate limit exceeded on {request.url.path}: {exc.message}")

        if exc.status_code >= 500:
            logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
            if settings.is_production:
                return error_response(
                    exc.status_code, INTERNAL_ERROR_MESSAGE, [INTERNAL_ERROR_DETAIL]
                )
        return error_response(exc.status_code, exc.message, exc.errors, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error for request {request.url}: {exc.errors()}")
        return error_response(
            status.HTTP_400_BAD_REQUEST, "Validation failed", _readable_errors(exc)
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return error_response(
                exc.status_code,
                "Endpoint not found",
                ["The requested endpoint does not exist"],
            )
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return error_response(
                exc.status_code,
                "Method not allowed",
                [f"{request.method} is not supported on {request.url.path}"],
                headers=getattr(exc, "headers", None),
            )
        return error_response(exc.status_code, str(exc.detail), [str(exc.detail)])

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE, [INTERNAL_ERROR_DETAIL]
        )

    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=settings.upload_dir), name="uploads")

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(products_router)
    app.include_router(orders_router)
    app.include_router(favorites_router)
    app.include_router(images_router)
    app.include_router(cache_router)

    return app

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront_api.core.application.exceptions import AuthenticationError, AuthorizationError
from storefront_api.core.domain.identity import AuthClaims
from storefront_api.infrastructure.rate_limiting import RateLimitRule
from storefront_api.infrastructure.resolution import Container

RATE_LIMIT_STATE_KEY = "rate_limit_headers"

bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> Container:
    return request.app.state.container


def client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def _apply_rule(request: Request, container: Container, rule: RateLimitRule) -> None:
    decision = container.rate_limiter.check(rule, client_key(request))
    # picked up by RateLimitHeadersMiddleware when the response starts
    setattr(request.state, RATE_LIMIT_STATE_KEY, decision.headers())


def general_rate_limit(request: Request, container: Container = Depends(get_container)) -> None:
    _apply_rule(request, container, container.rate_limits.general)


def auth_rate_limit(request: Request, container: Container = Depends(get_container)) -> None:
    _apply_rule(request, container, container.rate_limits.auth)


def order_rate_limit(request: Request, container: Container = Depends(get_container)) -> None:
    _apply_rule(request, container, container.rate_limits.order)


def admin_rate_limit(request: Request, container: Container = Depends(get_container)) -> None:
    _apply_rule(request, container, container.rate_limits.admin)


def search_rate_limit(request: Request, container: Container = Depends(get_container)) -> None:
    if request.query_params.get("search", "").strip():
        _apply_rule(request, container, container.rate_limits.search)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    container: Container = Depends(get_container),
) -> AuthClaims:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access denied", ["Authentication token is required"])
    return container.tokens.decode(credentials.credentials)


def require_admin(claims: AuthClaims = Depends(get_current_user)) -> AuthClaims:
    if not claims.is_admin:
        raise AuthorizationError(
            "Access forbidden", ["Admin role required to access this resource"]
        )
    return claims

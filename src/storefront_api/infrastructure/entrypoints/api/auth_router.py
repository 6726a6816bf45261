from fastapi import APIRouter, Depends, status

from storefront_api.infrastructure.entrypoints.api.dependencies import (
    auth_rate_limit,
    get_container,
)
from storefront_api.infrastructure.entrypoints.api.dtos import LoginRequestDTO, RegisterRequestDTO
from storefront_api.infrastructure.entrypoints.api.envelope import success_response
from storefront_api.infrastructure.entrypoints.api.mappers import ResponseMapper
from storefront_api.infrastructure.resolution import Container

router = APIRouter(prefix="/auth", tags=["auth"], dependencies=[Depends(auth_rate_limit)])


@router.post("/register")
def register(
    payload: RegisterRequestDTO | None = None,
    container: Container = Depends(get_container),
):
    payload = payload or RegisterRequestDTO()
    user = container.register_user().execute(payload.username, payload.email, payload.password)
    return success_response(
        "User registered successfully",
        ResponseMapper.registered_user(user),
        status_code=status.HTTP_201_CREATED,
    )


@router.post("/login")
def login(
    payload: LoginRequestDTO | None = None,
    container: Container = Depends(get_container),
):
    payload = payload or LoginRequestDTO()
    result = container.login().execute(payload.email, payload.password)
    return success_response(
        "Login successful",
        {"token": result.token, "user": ResponseMapper.user_profile(result.user)},
    )

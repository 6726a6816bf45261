"""Uniform ``{success, message, object, errors}`` response bodies."""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class BaseResponse(BaseModel):
    success: bool
    message: str
    object: Any | None = None
    errors: list[str] | None = None


class PaginatedResponse(BaseResponse):
    pageNumber: int
    pageSize: int
    totalSize: int
    totalPages: int


def _render(body: BaseModel, status_code: int, headers: dict[str, str] | None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=jsonable_encoder(body), headers=headers
    )


def success_response(
    message: str,
    obj: Any = None,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return _render(BaseResponse(success=True, message=message, object=obj), status_code, headers)


def error_response(
    status_code: int,
    message: str,
    errors: list[str] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = BaseResponse(success=False, message=message, object=None, errors=errors or None)
    return _render(body, status_code, headers)


def paginated_response(
    message: str,
    items: list[Any],
    page_number: int,
    page_size: int,
    total_size: int,
    total_pages: int,
) -> JSONResponse:
    body = PaginatedResponse(
        success=True,
        message=message,
        object=items,
        pageNumber=page_number,
        pageSize=page_size,
        totalSize=total_size,
        totalPages=total_pages,
    )
    return _render(body, 200, None)

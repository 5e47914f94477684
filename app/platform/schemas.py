from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Documents the `api_response` envelope in the OpenAPI schema."""

    status_code: int = 200
    status: str = "success"
    message: str
    data: T


class ErrorDetail(BaseModel):
    error: str
    field: str | None = None
    reason: str | None = None
    email: str | None = None


class ErrorResponse(APIResponse[ErrorDetail]):
    status: str = "error"

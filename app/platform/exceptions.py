from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.platform.logger import get_logger
from app.platform.response import api_response

logger = get_logger(__name__)


class WaitlistError(Exception):
    """Base class for every error the waitlist core raises on purpose."""

    code = "waitlist_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Something went wrong. Please try again."

    def to_dict(self) -> dict:
        return {"error": self.code}


class ValidationError(WaitlistError):
    """A submission field failed validation. Raised before any storage access."""

    code = "validation_error"
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Please check your information and try again."

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")

    def to_dict(self) -> dict:
        return {"error": self.code, "field": self.field, "reason": self.reason}


class DuplicateEmailError(WaitlistError):
    code = "duplicate_email"
    status_code = status.HTTP_409_CONFLICT
    message = "You're already on our waitlist! We'll be in touch soon."

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")

    def to_dict(self) -> dict:
        return {"error": self.code, "email": self.email}


class DuplicateUsernameError(WaitlistError):
    code = "duplicate_username"
    status_code = status.HTTP_409_CONFLICT
    message = "Username already taken"

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username already taken: {username}")

    def to_dict(self) -> dict:
        return {"error": self.code, "username": self.username}


class StorageUnavailableError(WaitlistError):
    code = "storage_unavailable"
    status_code = status.HTTP_502_BAD_GATEWAY
    message = "Our waitlist is temporarily unavailable. Please try again later."


def _request_error_reason(error: dict) -> str:
    if error.get("type") == "missing":
        return "required"
    return "invalid_type"


def add_exception_handlers(app):
    @app.exception_handler(WaitlistError)
    async def waitlist_exception_handler(request: Request, exc: WaitlistError):
        return api_response(message=exc.message, status_code=exc.status_code, data=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return api_response(message=str(exc.detail) or "Error", status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        loc = [part for part in first.get("loc", ()) if part != "body"]
        field = str(loc[0]) if loc else "body"
        return api_response(
            message="Please check your information and try again.",
            status_code=status.HTTP_400_BAD_REQUEST,
            data={
                "error": ValidationError.code,
                "field": field,
                "reason": _request_error_reason(first),
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return api_response(
            message="Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            data={"error": "internal_error"},
        )

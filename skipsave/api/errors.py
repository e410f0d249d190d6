from http import HTTPStatus
from typing import Any, Optional


class ApiError(Exception):
    """An error that reaches the client as {"error": {"code", "message", "details"?}}."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR
    code: str = "SERVER_ERROR"

    def __init__(
        self,
        message: str,
        details: Any = None,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details
        self.headers = headers
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code

    def to_dict(self) -> dict:
        return error_body(self.code, self.message, self.details)


class ValidationFailedError(ApiError):
    status_code = HTTPStatus.BAD_REQUEST
    code = "VALIDATION_ERROR"


class NotFoundError(ApiError):
    status_code = HTTPStatus.NOT_FOUND
    code = "NOT_FOUND"


class InvalidRequestError(ApiError):
    status_code = HTTPStatus.BAD_REQUEST
    code = "INVALID_REQUEST"


class RateLimitExceededError(ApiError):
    status_code = HTTPStatus.TOO_MANY_REQUESTS
    code = "RATE_LIMIT_EXCEEDED"


def error_body(code: str, message: str, details: Any = None) -> dict:
    error: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"error": error}

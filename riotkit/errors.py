"""Errors raised for unsuccessful API responses."""

from __future__ import annotations

_REASONS: dict[int, str] = {
    400: "bad request",
    401: "unauthorized",
    403: "forbidden",
    404: "not found",
    405: "method not allowed",
    415: "unsupported media type",
    429: "rate limit exceeded",
    500: "internal server error",
    502: "bad gateway",
    503: "service unavailable",
    504: "gateway timeout",
}

UNKNOWN_REASON = "unknown error reason"


class ApiError(Exception):
    """An error response from the API, identified by message and status code."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message, status_code)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ApiError(message={self.message!r}, status_code={self.status_code!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return (self.message, self.status_code) == (other.message, other.status_code)

    def __hash__(self) -> int:
        return hash((self.message, self.status_code))


def error_for_status(status_code: int) -> ApiError:
    """Return the error for an unsuccessful HTTP status code."""
    return ApiError(_REASONS.get(status_code, UNKNOWN_REASON), status_code)
"""
DocumentStack: Structured error catalog.

Every failure raised by the client is one of the variants below. Each variant
derives directly from DocumentStackError and carries an explicit `kind`, so
callers can dispatch either on the class or on the discriminant.
No raw httpx exceptions leak to the caller.
"""

from __future__ import annotations

import enum
from typing import Any


class ErrorKind(str, enum.Enum):
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    NETWORK = "network"
    TIMEOUT = "timeout"
    API = "api"
    RATE_LIMIT = "rate_limit"


class StatusCategory(str, enum.Enum):
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    SERVER_ERROR = "server_error"


def is_validation_status(status_code: int) -> bool:
    return status_code == 400


def is_authentication_status(status_code: int) -> bool:
    return status_code == 401


def is_forbidden_status(status_code: int) -> bool:
    return status_code == 403


def is_not_found_status(status_code: int) -> bool:
    return status_code == 404


def is_rate_limit_status(status_code: int) -> bool:
    return status_code == 429


def is_server_error_status(status_code: int) -> bool:
    return status_code >= 500


def status_category(status_code: int) -> StatusCategory | None:
    """Map an HTTP status to its semantic category, or None for plain API errors."""
    if is_validation_status(status_code):
        return StatusCategory.VALIDATION
    if is_authentication_status(status_code):
        return StatusCategory.AUTHENTICATION
    if is_forbidden_status(status_code):
        return StatusCategory.FORBIDDEN
    if is_not_found_status(status_code):
        return StatusCategory.NOT_FOUND
    if is_rate_limit_status(status_code):
        return StatusCategory.RATE_LIMIT
    if is_server_error_status(status_code):
        return StatusCategory.SERVER_ERROR
    return None


class DocumentStackError(Exception):
    """Base error with a kind discriminant and a human message."""

    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "message": str(self)}


class ConfigurationError(DocumentStackError):
    kind = ErrorKind.CONFIGURATION


class ValidationError(DocumentStackError):
    """Raised locally, before any request is sent."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, details: Any = None):
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        if self.details is not None:
            d["details"] = self.details
        return d


class NetworkError(DocumentStackError):
    """Transport, serialization or body-read failure."""

    kind = ErrorKind.NETWORK

    def __init__(self, message: str, cause: BaseException | None = None):
        self.cause = cause
        super().__init__(message)
        self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class RequestTimeoutError(DocumentStackError):
    kind = ErrorKind.TIMEOUT

    def __init__(self, timeout: int):
        self.timeout = timeout  # seconds
        super().__init__(f"request timed out after {timeout} seconds")

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d["timeout"] = self.timeout
        return d


class _StatusPredicates:
    status_code: int

    @property
    def category(self) -> StatusCategory | None:
        return status_category(self.status_code)

    @property
    def is_validation_error(self) -> bool:
        return is_validation_status(self.status_code)

    @property
    def is_authentication_error(self) -> bool:
        return is_authentication_status(self.status_code)

    @property
    def is_forbidden_error(self) -> bool:
        return is_forbidden_status(self.status_code)

    @property
    def is_not_found_error(self) -> bool:
        return is_not_found_status(self.status_code)

    @property
    def is_rate_limit_error(self) -> bool:
        return is_rate_limit_status(self.status_code)

    @property
    def is_server_error(self) -> bool:
        return is_server_error_status(self.status_code)


class APIError(_StatusPredicates, DocumentStackError):
    """The API answered with a non-200 status."""

    kind = ErrorKind.API

    def __init__(self, status_code: int, error_code: str, message: str, details: Any = None):
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "kind": self.kind.value,
            "status_code": self.status_code,
            "error_code": self.error_code,
            "message": self.message,
        }
        if self.details is not None:
            d["details"] = self.details
        return d


class RateLimitError(_StatusPredicates, DocumentStackError):
    """HTTP 429. Carries the server's suggested wait in seconds."""

    kind = ErrorKind.RATE_LIMIT

    def __init__(
        self,
        error_code: str,
        message: str,
        retry_after: int = 0,
        details: Any = None,
        status_code: int = 429,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.retry_after = retry_after
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "kind": self.kind.value,
            "status_code": self.status_code,
            "error_code": self.error_code,
            "message": self.message,
            "retry_after": self.retry_after,
        }
        if self.details is not None:
            d["details"] = self.details
        return d


# Every error produced from an HTTP status.
API_ERRORS = (APIError, RateLimitError)

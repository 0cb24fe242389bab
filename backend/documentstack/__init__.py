"""DocumentStack: Python client for the DocumentStack PDF generation API."""

from documentstack.api.client import DocumentStackClient
from documentstack.core.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ClientConfig,
    load_config,
)
from documentstack.errors import (
    API_ERRORS,
    APIError,
    ConfigurationError,
    DocumentStackError,
    ErrorKind,
    NetworkError,
    RateLimitError,
    RequestTimeoutError,
    StatusCategory,
    ValidationError,
    status_category,
)
from documentstack.models import (
    APIErrorBody,
    GenerateOptions,
    GenerateRequest,
    GenerateResponse,
)
from documentstack.utils.debug import DebugObserver, LoggingDebugObserver

__version__ = "1.0.0"

__all__ = [
    "API_ERRORS",
    "APIError",
    "APIErrorBody",
    "ClientConfig",
    "ConfigurationError",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "DebugObserver",
    "DocumentStackClient",
    "DocumentStackError",
    "ErrorKind",
    "GenerateOptions",
    "GenerateRequest",
    "GenerateResponse",
    "LoggingDebugObserver",
    "NetworkError",
    "RateLimitError",
    "RequestTimeoutError",
    "StatusCategory",
    "ValidationError",
    "load_config",
    "status_category",
]
